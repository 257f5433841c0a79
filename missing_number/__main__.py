from missing_number.cli import run

run()
