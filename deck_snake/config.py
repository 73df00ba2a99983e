# deck_snake/config.py
from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # shared / global
    grid_size: int = 20
    seed: Optional[int] = None

    # gameplay
    game_speed_ms: int = 100             # one tick per period
    avoid_snake: bool = False            # spawn food on free cells only

    # render
    render_cell: int = 20
    render_title: str = "Snake"
    render_show_hud: bool = True
    render_record_dir: Optional[str] = None
    fps: int = 60                        # host loop rate, not the tick rate

    # audio / assets
    asset_dir: str = "assets"
    audio_enabled: bool = True

    # persistence
    score_file: str = "highscore.json"
    score_key: str = "highestScore"
    run_log_path: Optional[str] = None

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
