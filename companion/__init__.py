"""
Application glue around the braingym engine: state container, actions,
notifications, capability ports and the snapshot boundary.
"""
