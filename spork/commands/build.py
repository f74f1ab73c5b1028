import time

from returns.io import IOResultE

from spork import log
from spork.domain.context import BuildInfo
from spork.domain.project import build_project
from spork.domain.targets import host_target


def report(infos: tuple[BuildInfo, ...], start: float) -> int:
    for info in infos:
        log.success(f"built '{info.name}' ({info.target}) -> '{info.output_path}'")
    log.success(f"finished in {time.perf_counter() - start:.2f}s")
    return 0


def build(args) -> IOResultE[int]:
    start = time.perf_counter()
    return (
        host_target()
        .bind(
            lambda host: build_project(
                args.dir, args.release, args.all, host, args.verbose
            )
        )
        .map(lambda infos: report(infos, start))
    )
