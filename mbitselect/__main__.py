from mbitselect.main import main

raise SystemExit(main())
