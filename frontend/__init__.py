"""
Job Application Tracker UI - Flask frontend.

Provides the job application form and list, synchronised with the
tracker service REST API, plus job posting parsing.
"""
