from axtree.cli import main

raise SystemExit(main())
