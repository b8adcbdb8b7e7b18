from typing import Dict


def init_metrics() -> Dict[str, int | float | bool]:
    return {
        'attempts': 0,
        'accepted_attempt': -1,
        'fallback_used': False,
        'fallback_corridor': False,
        'loops_opened': 0,
        'cells_pruned': 0,
        'path_length': 0,
        'turns': 0,
        'walls': 0,
        'open_cells': 0,
        'runtime_ms': 0,
    }
