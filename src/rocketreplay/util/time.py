def format_mission_time(t: float) -> str:
    # Round first so 59.96 s reads 01:00.0, not 00:60.0
    tenths = round(max(0.0, t) * 10)
    minutes, tenths = divmod(tenths, 600)
    return f"T+ {minutes:02d}:{tenths // 10:02d}.{tenths % 10}"
