from animal_api.main import run

run()
