from flightprofit.runner import main

raise SystemExit(main())
