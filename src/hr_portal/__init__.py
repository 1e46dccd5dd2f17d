"""HR Portal package.

Organized by feature modules (users, leave, dashboard) with a thin Flask
controller layer on top of service and repository layers.
"""
