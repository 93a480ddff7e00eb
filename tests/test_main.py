import logging
import re

import pytest

from curvescene.__main__ import main
from curvescene.logging_config import setup_logging

LINE = re.compile(r"^Point: \(.+, .+, .+\) Derivative: \(.+, .+, .+\)$")


def test_default_run(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 11
    for line in lines[:10]:
        assert LINE.match(line)
    assert lines[-1].startswith("Total sum of radii: ")
    float(lines[-1].split(": ")[1])


def test_seed_is_reproducible(capsys):
    main(["--seed", "42"])
    first = capsys.readouterr().out
    main(["--seed", "42"])
    assert capsys.readouterr().out == first


def test_count_flag_is_rejected():
    with pytest.raises(SystemExit) as exc_info:
        main(["--count", "3"])
    assert exc_info.value.code == 2


def test_verbose_logs_to_stderr(capsys):
    main(["--seed", "2", "-v"])
    captured = capsys.readouterr()
    assert "DEBUG" in captured.err
    assert "DEBUG" not in captured.out
    assert len(captured.out.splitlines()) == 11
    setup_logging()


def test_bad_argument():
    with pytest.raises(SystemExit) as exc_info:
        main(["--seed", "many"])
    assert exc_info.value.code == 2


def test_setup_logging_replaces_handlers():
    logger = setup_logging(verbose=True)
    assert logger.name == "curvescene"
    assert logger.level == logging.DEBUG
    logger = setup_logging()
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
