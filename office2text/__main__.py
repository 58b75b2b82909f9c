from office2text.cli import main

raise SystemExit(main())
