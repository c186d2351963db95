"""
Composable hyper-parameter schedules evaluated as pure functions of the iteration index.
"""
