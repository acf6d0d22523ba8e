from __future__ import annotations

import logging

from intgraph import cli


def test_cli_verbose_and_quiet_switch_levels(caplog, capsys) -> None:
    # verbose enables debug
    with caplog.at_level(logging.DEBUG, logger="intgraph"):
        cli.main(["--verbose", "run", "min", "3/2", "--format", "hex"])
    assert any("Debug logging enabled" in r.message for r in caplog.records)
    assert any("Dispatching min" in r.message for r in caplog.records)

    # quiet suppresses info
    caplog.clear()
    with caplog.at_level(logging.INFO, logger="intgraph"):
        cli.main(["--quiet", "run", "3sum", "1/2/3", "--format", "hex"])
    assert not any(r.levelno == logging.INFO for r in caplog.records)

    # default level reports an empty result at INFO
    caplog.clear()
    cli.main(["run", "3sum", "1/2/3", "--format", "hex"])
    assert any("3sum: no result" in r.message for r in caplog.records)
