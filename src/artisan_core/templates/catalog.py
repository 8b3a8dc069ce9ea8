"""Fixed option lists referenced by the preambles."""

VEO_STYLES = [
    "Cinematic", "Film Noir", "Neo-Noir", "Technicolor", "Silent Film", "Vintage Film (e.g., 1920s, 1950s, 1970s, 1980s)",
    "Grainy Film Stock (e.g., 8mm, 16mm, 35mm)", "Super 8mm Film", "16mm Film", "35mm Film", "70mm Film", "IMAX Look",
    "Dogme 95 Style", "French New Wave (Nouvelle Vague)", "Italian Neorealism", "German Expressionism", "Hollywood Golden Age Glamour",
    "Spaghetti Western", "Blaxploitation Film Style", "Giallo Film Aesthetics", "Found Footage Style", "Mockumentary",
    "Observational Documentary", "Cinéma Vérité", "1980s Music Video Style", "90s Grunge Aesthetic", "90s Skateboard Video", "90s VHS Camcorder Look",
    "Y2K Aesthetic (late 90s-early 2000s)", "Early 2000s Digicam Footage", "MiniDV Camcorder Look", "Glitch Art Video",
    "Datamoshing", "Vaporwave Aesthetic", "Retrowave/Synthwave Visuals", "Outrun Style", "Cyberpunk (Classic 80s, Modern)",
    "Steampunk Visuals", "Dieselpunk", "Atompunk", "Solarpunk Futures", "Cassette Futurism", "Lo-fi Video",
    "Analog Horror", "CRT Screen Display", "Pixelation Effect", "Hyperrealistic", "Photorealistic CGI", "Surrealism", "Abstract Visuals", "Geometric Abstraction", "Minimalist Video",
    "Impressionistic Video", "Expressionistic Visuals", "Pop Art Style", "Art Deco Design", "Bauhaus Inspired Video",
    "Anime (Generic)", "Shonen Anime Style", "Shojo Anime Style", "Mecha Anime Action", "Slice of Life Anime Look",
    "Isekai Anime Visuals", "Classic Disney Animation Style", "Warner Bros. Cartoon Style (e.g., Looney Tunes)",
    "Hanna-Barbera Animation", "Rotoscoping Animation", "Stop Motion Animation", "Claymation", "Cut-out Animation",
    "Pixel Art Animation", "Voxel Art Style", "Cel-shaded Animation", "Motion Comic Style", "Graphic Novel Paneling",
    "Watercolor Painting Animation", "Oil Painting on Glass Animation", "Charcoal Sketch Animation", "Pencil Drawing Look",
    "Ink Wash Painting Style", "Ukiyo-e Inspired Animation", "Silhouette Animation", "Dreamlike Sequence", "Ethereal and Hazy", "Gritty Realism", "Dark Fantasy Setting", "High Fantasy Epic",
    "Urban Fantasy Visuals", "Sci-Fi (Generic)", "Hard Sci-Fi Realism", "Space Opera Grandeur", "Gothic Romance/Horror",
    "Cosmic Horror (Lovecraftian)", "Body Horror Visuals", "Slasher Film Tropes", "Psychological Thriller Atmosphere",
    "Neo-Western", "Acid Western", "Whimsical and Playful", "Nostalgic Haze", "Utopian Society Visuals",
    "Dystopian Future Look", "Post-Apocalyptic Setting", "Infrared Video Look", "Thermal Imaging View", "X-Ray Effect Visual", "Long Exposure (Video)", "Light Trails",
    "Tilt-Shift Miniaturization", "Macro Videography Style", "Split Diopter Shot", "Heavy Lens Flare", "Anamorphic Lens Look",
    "Bleach Bypass Process", "Cross-Processing (XPro) Look", "Day for Night Cinematography", "Forced Perspective",
    "Frequent Dutch Angles", "Ken Burns Effect on Stills", "Matte Painting Backgrounds", "Bullet Time Effect",
    "Video Double Exposure", "Light Painting in Motion", "Fisheye Lens Perspective", "Rack Focus Shots",
    "SnorriCam Perspective", "Drone/Aerial Shot (Specify movement: e.g., sweeping, top-down)", "Satellite View", "Microscopic View",
]

# Quoted, comma-separated form embedded in preambles that must pick a style.
VEO_STYLES_FOR_PROMPT = ", ".join(f'"{style}"' for style in VEO_STYLES if style.strip())

PROMPT_COUNT_OPTIONS = (1, 3, 5)
