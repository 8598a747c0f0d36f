from harga_pangan.cli.main import main

raise SystemExit(main())
