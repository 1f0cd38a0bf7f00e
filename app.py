from src.worklog_payroll.worklog_payroll.main import create_app

app = create_app()


if __name__ == '__main__':
    app.run(debug=bool(app.config.get("DEBUG", False)))
