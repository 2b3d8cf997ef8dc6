from project_showcase.cli import main

raise SystemExit(main())
