"""WSGI entry point: `flask --app app run` or `python app.py`."""

from src.payroll_system.payroll_system.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=app.config["DEBUG"])
