"""Companies Info API - sociétés, pays et contacts / companies, countries and contacts."""
