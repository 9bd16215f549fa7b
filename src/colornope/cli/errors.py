# follow click's exit-status convention (2 = usage error)
EXIT_OK = 0  # Color enabled / normal success
EXIT_DISABLED = 1  # Color disabled for the queried stream
EXIT_USAGE = 2  # Invalid option combination (click's usage-error status)
