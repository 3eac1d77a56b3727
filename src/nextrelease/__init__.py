"""nextrelease : finalise et prépare un changelog groupé autour de chaque release."""
