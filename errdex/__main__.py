from errdex.main import run

run()
