from slyce.cli import main

raise SystemExit(main())
