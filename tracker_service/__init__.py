"""Package marker for the tracker service (REST API over the job application store)."""
