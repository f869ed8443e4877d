from rsp.cli import main

raise SystemExit(main())
