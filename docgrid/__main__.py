"""Allow ``python -m docgrid <url>``."""

from .main import main

raise SystemExit(main())
