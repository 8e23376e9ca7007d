from gcd_tool.cli.main import run

run()
