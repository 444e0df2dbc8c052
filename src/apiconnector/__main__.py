from apiconnector.cli import main

raise SystemExit(main())
