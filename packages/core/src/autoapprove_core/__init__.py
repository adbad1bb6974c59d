"""Auto-approval policy, event payload handling and the GitHub approval call."""
