from docrelay.main import run

run()
