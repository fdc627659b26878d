from ten_thousand.watch import main

raise SystemExit(main())
