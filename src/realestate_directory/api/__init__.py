"""
FastAPI REST API for the Real Estate Directory

Provides REST endpoints for the directory frontend:
- Property, agency, agent, service and tool search
- Registration and sign-in
- Reviews of agencies and agents
- Admin approvals
- Suburb gazetteer and health checks
"""
