from anchor_links.cli import main

raise SystemExit(main())
