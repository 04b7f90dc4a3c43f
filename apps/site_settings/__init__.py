"""Site settings app: key/value configuration edited from the back-office."""
