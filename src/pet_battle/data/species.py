from pet_battle.enums import ElementType, ModelType, Rarity
from pet_battle.schema.species_info import SpeciesInfo


def _vrm_pet(name: str, tag: str, rarity: Rarity = Rarity.COMMON) -> SpeciesInfo:
    return SpeciesInfo(name=name, model_url=f"/assets/pets/{tag}_1.vrm", model_type=ModelType.VRM, rarity=rarity)


SPECIES_INFOS: dict[str, SpeciesInfo] = {
    # VRM pets
    "cutephetta": SpeciesInfo(name="Cute Phetta", model_url="/assets/avatars/phettav5.vrm", model_type=ModelType.VRM, rarity=Rarity.COMMON),
    "lovebug": SpeciesInfo(name="Lovebug", model_url="/assets/pets/lovebug_1.vrm", model_type=ModelType.VRM, rarity=Rarity.COMMON),
    "meep": SpeciesInfo(name="Meep", model_url="/assets/pets/meep_1.vrm", model_type=ModelType.VRM, rarity=Rarity.UNCOMMON),
    "pizzalotl": SpeciesInfo(name="Pizzalotl", model_url="/assets/pets/pizzalotl_1.vrm", model_type=ModelType.VRM, rarity=Rarity.RARE),
    "alienfella": SpeciesInfo(name="Alien Fella", model_url="/assets/pets/alienfella_1.vrm", model_type=ModelType.VRM, rarity=Rarity.RARE),
    "redfox": SpeciesInfo(name="Red Fox", model_url="/assets/pets/redfox_1.vrm", model_type=ModelType.VRM, rarity=Rarity.UNCOMMON),
    "griffin": SpeciesInfo(name="Griffin", model_url="/assets/pets/blufella_1.vrm", model_type=ModelType.VRM, rarity=Rarity.LEGENDARY),
    "sparky": SpeciesInfo(name="Sparky", model_url="/assets/pets/sparky_1.vrm", model_type=ModelType.VRM, rarity=Rarity.COMMON),
    # GLB animals
    "cat": SpeciesInfo(name="Cat", model_url="/assets/animal/Cat.glb", model_type=ModelType.GLB, rarity=Rarity.COMMON),
    "dog": SpeciesInfo(name="Dog", model_url="/assets/animal/Dog.glb", model_type=ModelType.GLB, rarity=Rarity.UNCOMMON),
    "wolf": SpeciesInfo(name="Wolf", model_url="/assets/animal/Wolf.glb", model_type=ModelType.GLB, rarity=Rarity.EPIC),
    # Remaining VRM roster
    "virubug": _vrm_pet("Virubug", "virubug"),
    "blufella": _vrm_pet("Blu Fella", "blufella"),
    "bubblegum": _vrm_pet("Bubblegum", "bubblegum"),
    "droosippy": _vrm_pet("Droosippy", "droosippy"),
    "metarabbit": _vrm_pet("Meta Rabbit", "metarabbit", Rarity.UNCOMMON),
    "multicoloredblob": _vrm_pet("Multicolored Blob", "multicoloredblob"),
    "nature": _vrm_pet("Nature", "nature"),
    "pinkfella": _vrm_pet("Pink Fella", "pinkfella"),
    "punkrockbee": _vrm_pet("Punk Rock Bee", "punkrockbee", Rarity.UNCOMMON),
    "punkrocksqurrield": _vrm_pet("Punk Rock Squirrel", "punkrocksqurrield", Rarity.UNCOMMON),
    "sippydroo": _vrm_pet("Sippydroo", "sippydroo"),
    "toonely": _vrm_pet("Toonely", "toonely"),
    "tullo": _vrm_pet("Tullo", "tullo"),
    "wires": _vrm_pet("Wires", "wires"),
    "cuney": _vrm_pet("Cuney", "cuney"),
    "lucy": _vrm_pet("Lucy", "lucy"),
    "karaokerobot": _vrm_pet("Karaoke Robot", "karaokerobot", Rarity.RARE),
    "slotmachine": _vrm_pet("Slot Machine", "slotmachine", Rarity.RARE),
    "twolegrobot": _vrm_pet("Two Leg Robot", "twolegrobot", Rarity.UNCOMMON),
    "antman": _vrm_pet("Antman", "antman"),
    "chessnpc": _vrm_pet("Chess Master", "chessnpc", Rarity.RARE),
    "acecat": _vrm_pet("Ace Cat", "acecat", Rarity.UNCOMMON),
    "bigsnail": _vrm_pet("Big Snail", "bigsnail"),
    "bobau": _vrm_pet("Bobau", "bobau"),
    "borgorrabbit": _vrm_pet("Borgor Rabbit", "borgorrabbit", Rarity.UNCOMMON),
    "deity": _vrm_pet("Deity", "deity", Rarity.EPIC),
    "fishsmokes": _vrm_pet("Fish Smokes", "fishsmokes"),
    "mrsanta": _vrm_pet("Mr Santa", "mrsanta", Rarity.RARE),
    "crab": _vrm_pet("Crab", "crab"),
    "wassie": _vrm_pet("Wassie", "wassie"),
    "slotmachinehjones": _vrm_pet("Slot Machine H. Jones", "slotmachinehjones", Rarity.EPIC),
    "snail": _vrm_pet("Snail", "snail"),
    "toonlighthouse": _vrm_pet("Toon Lighthouse", "toonlighthouse", Rarity.UNCOMMON),
    "toonpizza": _vrm_pet("Toon Pizza", "toonpizza"),
    "catrussel": _vrm_pet("Catrussel", "catrussel", Rarity.UNCOMMON),
    "mrphish": _vrm_pet("Mr Phish", "mrphish"),
    "alhu": _vrm_pet("Alhu", "alhu", Rarity.RARE),
    "alienspaceship": _vrm_pet("Alien Spaceship", "alienspaceship", Rarity.RARE),
    "borgormachine": _vrm_pet("Borgor Machine", "borgormachine", Rarity.RARE),
    "chef": _vrm_pet("Chef", "chef"),
    "fishbones": _vrm_pet("Fishbones", "fishbones"),
    "newphetta": _vrm_pet("New Phetta", "newphetta", Rarity.UNCOMMON),
    "solar": _vrm_pet("Solar", "solar", Rarity.RARE),
    "zwist": _vrm_pet("Zwist", "zwist", Rarity.EPIC),
    "scientest": _vrm_pet("Scientest", "scientest"),
    "streamfella": _vrm_pet("Stream Fella", "streamfella"),
    "shinydragon": _vrm_pet("Shiny Dragon", "shinydragon", Rarity.EPIC),
}

SPECIES_ELEMENTS: dict[str, ElementType] = {
    "cutephetta": ElementType.SPIRIT,
    "lovebug": ElementType.AIR,
    "meep": ElementType.EARTH,
    "virubug": ElementType.WATER,
    "pizzalotl": ElementType.FIRE,
    "alienfella": ElementType.SPIRIT,
    "blufella": ElementType.WATER,
    "bubblegum": ElementType.AIR,
    "droosippy": ElementType.WATER,
    "griffin": ElementType.AIR,
    "metarabbit": ElementType.SPIRIT,
    "multicoloredblob": ElementType.SPIRIT,
    "nature": ElementType.EARTH,
    "pinkfella": ElementType.SPIRIT,
    "punkrockbee": ElementType.AIR,
    "punkrocksqurrield": ElementType.EARTH,
    "redfox": ElementType.FIRE,
    "sippydroo": ElementType.WATER,
    "sparky": ElementType.FIRE,
    "toonely": ElementType.SPIRIT,
    "tullo": ElementType.SPIRIT,
    "wires": ElementType.AIR,
    "cuney": ElementType.SPIRIT,
    "lucy": ElementType.SPIRIT,
    "karaokerobot": ElementType.FIRE,
    "slotmachine": ElementType.EARTH,
    "twolegrobot": ElementType.AIR,
    "antman": ElementType.EARTH,
    "chessnpc": ElementType.SPIRIT,
    "acecat": ElementType.AIR,
    "bigsnail": ElementType.WATER,
    "bobau": ElementType.WATER,
    "borgorrabbit": ElementType.FIRE,
    "deity": ElementType.SPIRIT,
    "fishsmokes": ElementType.WATER,
    "mrsanta": ElementType.SPIRIT,
    "crab": ElementType.WATER,
    "wassie": ElementType.WATER,
    "slotmachinehjones": ElementType.SPIRIT,
    "snail": ElementType.EARTH,
    "toonlighthouse": ElementType.FIRE,
    "toonpizza": ElementType.FIRE,
    "catrussel": ElementType.FIRE,
    "mrphish": ElementType.WATER,
    "alhu": ElementType.SPIRIT,
    "alienspaceship": ElementType.AIR,
    "borgormachine": ElementType.EARTH,
    "chef": ElementType.FIRE,
    "fishbones": ElementType.WATER,
    "newphetta": ElementType.SPIRIT,
    "solar": ElementType.FIRE,
    "zwist": ElementType.SPIRIT,
    "scientest": ElementType.WATER,
    "streamfella": ElementType.AIR,
    "shinydragon": ElementType.FIRE,
    # GLB animals
    "cat": ElementType.EARTH,
    "dog": ElementType.EARTH,
    "wolf": ElementType.AIR,
}

# Move ids in move-selection order
SPECIES_MOVESETS: dict[str, tuple[str, ...]] = {
    "cutephetta": ("tackle", "cosmicBeam", "thirdEye", "vibeCheck"),
    "lovebug": ("scratch", "gustSlash", "cloudNine", "zephyrDash"),
    "meep": ("tackle", "rootSlam", "earthenGuard", "boulderBash"),
    "virubug": ("scratch", "splashWave", "drenchSoak", "tidalCrush"),
    "pizzalotl": ("tackle", "emberBlast", "hotboxHaze", "infernoRush"),
    "alienfella": ("glare", "cosmicBeam", "dimensionRift", "astralPunch"),
    "blufella": ("tackle", "splashWave", "mellowTide", "tidalCrush"),
    "bubblegum": ("scratch", "gustSlash", "cloudNine", "tornadoSpin"),
    "droosippy": ("rest", "splashWave", "mellowTide", "drenchSoak"),
    "griffin": ("scratch", "gustSlash", "tornadoSpin", "zephyrDash"),
    "metarabbit": ("tackle", "astralPunch", "thirdEye", "dimensionRift"),
    "multicoloredblob": ("rest", "cosmicBeam", "vibeCheck", "thirdEye"),
    "nature": ("rest", "rootSlam", "earthenGuard", "naturesBind"),
    "pinkfella": ("glare", "cosmicBeam", "cloudNine", "vibeCheck"),
    "punkrockbee": ("scratch", "gustSlash", "zephyrDash", "tornadoSpin"),
    "punkrocksqurrield": ("tackle", "rootSlam", "boulderBash", "earthenGuard"),
    "redfox": ("scratch", "emberBlast", "blazeUp", "infernoRush"),
    "sippydroo": ("rest", "splashWave", "mellowTide", "tidalCrush"),
    "sparky": ("tackle", "emberBlast", "hotboxHaze", "blazeUp"),
    "toonely": ("glare", "cosmicBeam", "astralPunch", "vibeCheck"),
    "tullo": ("rest", "cosmicBeam", "thirdEye", "dimensionRift"),
    "wires": ("scratch", "gustSlash", "zephyrDash", "glare"),
    "cuney": ("tackle", "cosmicBeam", "vibeCheck", "cloudNine"),
    "lucy": ("glare", "cosmicBeam", "thirdEye", "astralPunch"),
    "karaokerobot": ("scratch", "emberBlast", "infernoRush", "hotboxHaze"),
    "slotmachine": ("tackle", "boulderBash", "earthenGuard", "rootSlam"),
    "twolegrobot": ("scratch", "gustSlash", "zephyrDash", "tornadoSpin"),
    "antman": ("tackle", "rootSlam", "boulderBash", "earthenGuard"),
    "chessnpc": ("glare", "cosmicBeam", "thirdEye", "vibeCheck"),
    "acecat": ("scratch", "gustSlash", "zephyrDash", "cloudNine"),
    "bigsnail": ("rest", "splashWave", "mellowTide", "earthenGuard"),
    "bobau": ("rest", "splashWave", "mellowTide", "drenchSoak"),
    "borgorrabbit": ("tackle", "emberBlast", "hotboxHaze", "blazeUp"),
    "deity": ("glare", "cosmicBeam", "dimensionRift", "thirdEye"),
    "fishsmokes": ("scratch", "splashWave", "hotboxHaze", "drenchSoak"),
    "mrsanta": ("rest", "cosmicBeam", "vibeCheck", "cloudNine"),
    "crab": ("tackle", "splashWave", "earthenGuard", "tidalCrush"),
    "wassie": ("tackle", "splashWave", "mellowTide", "tidalCrush"),
    "slotmachinehjones": ("glare", "cosmicBeam", "vibeCheck", "dimensionRift"),
    "snail": ("rest", "rootSlam", "earthenGuard", "mellowTide"),
    "toonlighthouse": ("glare", "emberBlast", "blazeUp", "cosmicBeam"),
    "toonpizza": ("tackle", "emberBlast", "hotboxHaze", "infernoRush"),
    "catrussel": ("scratch", "emberBlast", "blazeUp", "infernoRush"),
    "mrphish": ("tackle", "splashWave", "mellowTide", "tidalCrush"),
    "alhu": ("glare", "cosmicBeam", "thirdEye", "vibeCheck"),
    "alienspaceship": ("scratch", "gustSlash", "zephyrDash", "tornadoSpin"),
    "borgormachine": ("tackle", "boulderBash", "earthenGuard", "rootSlam"),
    "chef": ("tackle", "emberBlast", "hotboxHaze", "blazeUp"),
    "fishbones": ("rest", "splashWave", "drenchSoak", "tidalCrush"),
    "newphetta": ("glare", "cosmicBeam", "astralPunch", "dimensionRift"),
    "solar": ("scratch", "emberBlast", "blazeUp", "infernoRush"),
    "zwist": ("glare", "cosmicBeam", "thirdEye", "dimensionRift"),
    "scientest": ("rest", "splashWave", "mellowTide", "drenchSoak"),
    "streamfella": ("scratch", "gustSlash", "cloudNine", "zephyrDash"),
    "shinydragon": ("scratch", "emberBlast", "infernoRush", "blazeUp"),
    # GLB animals
    "cat": ("scratch", "tackle", "gustSlash", "rootSlam"),
    "dog": ("tackle", "rootSlam", "scratch", "gustSlash"),
    "wolf": ("scratch", "gustSlash", "tackle", "cosmicBeam"),
}

# Only drawn for NPC opponents on a successful legendary roll
LEGENDARY_SPECIES: tuple[str, ...] = ("griffin", "wolf")

DEFAULT_MOVESET: tuple[str, ...] = ("tackle", "scratch", "glare", "rest")

NPC_NAME_PREFIXES: tuple[str, ...] = ("Chill", "Groovy", "Mellow", "Trippy", "Cosmic", "Dank", "Hazy", "Blazed", "Vibin", "Lifted")
NPC_NAME_SUFFIXES: tuple[str, ...] = ("Dude", "Bro", "Homie", "Wanderer", "Tripper", "Dreamer", "Floater", "Chiller", "Seeker", "Spirit")
