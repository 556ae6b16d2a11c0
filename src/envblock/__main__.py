from envblock.entrypoint import run

run()
