"""
BrainGym - workout-aware study companion engine.

Pure scheduling and recommendation logic:
- SM-2 card scheduling and due-set selection (braingym.sm2)
- Readiness estimation and study-block recommendation (braingym.recovery)
- Review session state machine (braingym.session)

Every function that needs "now" takes it as an argument.
"""
