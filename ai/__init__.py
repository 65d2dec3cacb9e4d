"""
ai package – Enemy behaviour, match statistics and headless simulation.

Modules:
    pursuit            – Chase-and-shoot controller driving every enemy
    stats              – Per-match statistics and the health trend chart
    simulation_runner  – Scripted bot matches with no window (--simulate N)
"""
