from qr_generator.app import GENERATE_PATH, create_app

app = create_app()


def main():
    host = app.config["HOST"]
    port = app.config["PORT"]
    print("QR Code Generator starting...")
    print(f"Server starting on {host}:{port}")
    print(f"QR generation: POST http://localhost:{port}{GENERATE_PATH}?text=your-text-here")
    app.run(host=host, port=port, threaded=True)


if __name__ == "__main__":
    main()
