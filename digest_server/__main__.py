from digest_server.main import run

run()
