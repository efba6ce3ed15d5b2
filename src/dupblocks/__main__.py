from dupblocks.cli.main import app

app(prog_name="dupblocks")
