import sys

from docpatterns.demo import main

sys.exit(main())
