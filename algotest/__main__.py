from algotest.main import run

run()
