from todos.main import run

run()
