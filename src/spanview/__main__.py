from spanview.cli.main import app

app()
