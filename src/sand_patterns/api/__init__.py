"""Sand patterns API packages."""
