"""Command tree for scheduled jobs with global and per-command flags."""