"""Asset manifest of the tower defense game.

Paths are relative to ``assets/img`` (textures) and ``assets/sound``
(sounds), without extension.
"""

from .core.types import AssetKind, Manifest, make_asset

TEXTURE = AssetKind.TEXTURE
SOUND = AssetKind.SOUND

DEFAULT_MANIFEST = Manifest(
    [
        make_asset("monster/zombie_1", "Troll", TEXTURE),
        make_asset("monster/zombie_2", "Zombie2", TEXTURE),
        make_asset("monster/zombie_3", "Zombie3", TEXTURE),
        make_asset("monster/zombie_4", "Zombie4", TEXTURE),
        make_asset("monster/zombie_5", "Zombie5", TEXTURE),
        make_asset("monster/zombie_6", "Zombie6", TEXTURE),
        make_asset("monster/zombie_7", "Zombie7", TEXTURE),
        make_asset("monster/zombie_8", "Zombie8", TEXTURE),
        make_asset("monster/zombie_9", "Zombie9", TEXTURE),
        make_asset("monster/zombie_10", "Zombie10", TEXTURE),
        make_asset("map/map1", "Map1", TEXTURE),
        make_asset("map/map2", "Map2", TEXTURE),
        make_asset("map/map3", "Map3", TEXTURE),
        make_asset("tower/archer", "TowerFreezer", TEXTURE),
        make_asset("tower/basic", "TowerSimplifier", TEXTURE),
        make_asset("tower/arrow", "Arrow", TEXTURE),
        make_asset("ui/main_menu", "MainMenu", TEXTURE),
        make_asset("ui/select_level", "SelectLevel", TEXTURE),
        make_asset("ui/level_finished", "LevelFinished", TEXTURE),
        make_asset("ui/infobox", "InfoBox", TEXTURE),
        make_asset("ui/ui", "Ui", TEXTURE),
        make_asset("ui/help_screen", "HelpScreen", TEXTURE),
        make_asset("text_shield", "TextShield", TEXTURE),
        make_asset("wakka", "MainMenuBgSound", SOUND),
        make_asset("level_failed", "LevelFailed", SOUND),
        make_asset("level_success", "LevelSuccess", SOUND),
        make_asset("zombie_die", "ZombieDie", SOUND),
        make_asset("freezer_fire", "FreezerFire", SOUND),
        make_asset("freezer_hit", "FreezerHit", SOUND),
    ]
)
