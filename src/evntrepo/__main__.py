from evntrepo.cli import main

raise SystemExit(main())
