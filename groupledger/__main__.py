# groupledger/__main__.py
# Local runner: python -m groupledger
from .app import app


def main():
    app.run(debug=app.config["DEBUG"], port=app.config["PORT"])


if __name__ == '__main__':
    main()
