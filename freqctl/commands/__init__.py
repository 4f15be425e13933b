"""Command implementations behind the freqctl CLI."""
