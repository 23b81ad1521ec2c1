from brainteasers.main import app

app()
