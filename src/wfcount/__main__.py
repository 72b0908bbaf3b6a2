from wfcount.cli import main

raise SystemExit(main())
