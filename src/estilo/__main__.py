from estilo.cli import main

raise SystemExit(main())
