from planet_duel.app import main

raise SystemExit(main())
