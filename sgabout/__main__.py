from sgabout.main import main

raise SystemExit(main())
