"""StrideFit: gait-matched running shoe recommendations with local persistence."""

__version__ = "1.0.0"
