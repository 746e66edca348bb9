from bibliotheque.main import app

app()
