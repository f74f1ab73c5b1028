from returns.io import IOResultE

from spork.domain.project import run_project
from spork.domain.targets import host_target


def run(args) -> IOResultE[int]:
    return (
        host_target()
        .bind(
            lambda host: run_project(
                args.dir, args.release, args.all, host, args.verbose
            )
        )
        .map(lambda _: 0)
    )
