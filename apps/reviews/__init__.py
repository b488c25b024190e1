"""Reviews app package: feedback messages left by users."""
