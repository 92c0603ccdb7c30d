import sys

from markov_textgen.cli.cli import main

sys.exit(main())
