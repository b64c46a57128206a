"""``python -m chess960`` entry point."""

from chess960.cli import main

raise SystemExit(main())
