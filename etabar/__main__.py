from etabar.cli import main

raise SystemExit(main())
