from app.filing import create_app

app = create_app()
