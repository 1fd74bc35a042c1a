"""
Enable running the package with: python -m weekly_summarizer

- __init__.py  -> runs when someone does `import weekly_summarizer`
- __main__.py  -> runs when someone does `python -m weekly_summarizer`
- main.py      -> contains the actual main() function and CLI logic
"""

from .main import main

# raise SystemExit is equivalent to sys.exit() but doesn't require importing sys
raise SystemExit(main())
