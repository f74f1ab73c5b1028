import sys

from returns.io import IOResultE
from returns.pipeline import is_successful
from returns.unsafe import unsafe_perform_io

from spork import commands, log
from spork.args import ArgsConfig, args_parse


def spork(args: ArgsConfig) -> IOResultE[int]:
    match args.action:
        case "new":
            return commands.new(args)
        case "init":
            return commands.init(args)
        case "build":
            return commands.build(args)
        case "run":
            return commands.run(args)
        case "clean":
            return commands.clean(args)
        case action:
            return IOResultE.from_failure(
                NotImplementedError(f"{action} is not implemented yet")
            )


def main():
    args = args_parse(sys.argv[1:])
    result = spork(args)
    if not is_successful(result):
        log.fatal(unsafe_perform_io(result.failure()))
        sys.exit(1)
