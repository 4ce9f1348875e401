import logging
import sys


def setup_logging(verbose: bool = False) -> None:
    """
    Console logging for the tools. The library itself only creates loggers.
    - INFO by default, DEBUG with verbose (terrain retries, chosen positions).
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
    logging.getLogger("PIL").setLevel(logging.WARNING)
