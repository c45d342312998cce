import logging

import fnjudge.constants as constants
from fnjudge.__main__ import main


def test_driver_report(capsys):
    main()
    out = capsys.readouterr().out
    assert out == "Evaluating candidate's solution function...\nCandidate's score: 10/100\n"


def test_driver_logging_replaces_existing_config(monkeypatch):
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    monkeypatch.setattr(constants, 'DEBUG', True)
    try:
        root.addHandler(logging.NullHandler())
        root.setLevel(logging.WARNING)
        main()
        assert root.level == logging.DEBUG
        assert not any(isinstance(handler, logging.NullHandler) for handler in root.handlers)
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)
