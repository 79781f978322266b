from tdnet_scraper.cli import main

raise SystemExit(main())
