"""
Application Layer for the PushPullRun data layer.

This package contains:
- ports/: Abstract repository and identity interfaces
- exceptions.py: Error taxonomy shared with the infrastructure adapters
- results.py: OperationResult, the uniform outcome of asynchronous actions
- auth_session.py: Sign-up/sign-in flows spanning identity and profile stores
- state_controller.py: Published state and fire-and-forget user actions
"""
