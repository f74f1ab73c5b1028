from spork.commands.build import build
from spork.commands.clean import clean
from spork.commands.new import init, new
from spork.commands.run_cmd import run

__all__ = ["build", "clean", "init", "new", "run"]
