"""Reference-table driven engines: ISO tolerances/fits and thread sizing."""
