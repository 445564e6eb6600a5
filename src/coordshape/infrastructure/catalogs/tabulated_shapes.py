"""Vertex tables for SHAPE polyhedra without a simple closed form.

Each entry is (code, name, point group, vertices, center). Johnson solids
and several spherical shapes are not centered on their vertex centroid, so
the center is the position the metal takes inside the polyhedron.
"""

_ORIGIN = (0.0, 0.0, 0.0)

TABULATED_SHAPES = [
    (
        "JTBPY-5",
        "Trigonal Bipyramid (J12)",
        "D3h",
        [
            (0.9258201, 0.0, 0.0),
            (-0.46291005, 0.801783726, 0.0),
            (-0.46291005, -0.801783726, 0.0),
            (0.0, 0.0, 1.309307341),
            (0.0, 0.0, -1.309307341),
        ],
        _ORIGIN,
    ),
    (
        "JPPY-6",
        "Pentagonal Pyramid (J2)",
        "C5v",
        [
            (1.146281781, 0.0, 0.101205872),
            (0.354220551, 1.090178757, 0.101205872),
            (-0.927361441, 0.673767526, 0.101205872),
            (-0.927361441, -0.673767526, 0.101205872),
            (0.354220551, -1.090178757, 0.101205872),
            (0.0, 0.0, -0.60723523),
        ],
        (0.0, 0.0, 0.101205872),
    ),
    (
        "JPBPY-7",
        "Pentagonal Bipyramid (J13)",
        "D5h",
        [
            (1.178109257, 0.0, 0.0),
            (0.364055782, 1.120448485, 0.0),
            (-0.95311041, 0.692475247, 0.0),
            (-0.95311041, -0.692475247, 0.0),
            (0.364055782, -1.120448485, 0.0),
            (0.0, 0.0, 0.728111563),
            (0.0, 0.0, -0.728111563),
        ],
        _ORIGIN,
    ),
    (
        "JETPY-7",
        "Elongated Triangular Pyramid (J7)",
        "C3v",
        [
            (0.729093431, 0.0, 0.423600027),
            (0.729093431, 0.0, -0.83922684),
            (-0.364546716, 0.631413433, 0.423600027),
            (-0.364546716, 0.631413433, -0.83922684),
            (-0.364546716, -0.631413433, 0.423600027),
            (-0.364546716, -0.631413433, -0.83922684),
            (0.0, 0.0, 1.454693846),
        ],
        (0.0, 0.0, -0.207813407),
    ),
    (
        "JGBF-8",
        "Gyrobifastigium (J26)",
        "D2d",
        [
            (0.612372436, 0.0, 1.060660172),
            (-0.612372436, 0.0, 1.060660172),
            (0.612372436, 0.612372436, 0.0),
            (0.612372436, -0.612372436, 0.0),
            (-0.612372436, -0.612372436, 0.0),
            (-0.612372436, 0.612372436, 0.0),
            (0.0, 0.612372436, -1.060660172),
            (0.0, -0.612372436, -1.060660172),
        ],
        _ORIGIN,
    ),
    (
        "JETBPY-8",
        "Elongated Triangular Bipyramid (J14)",
        "D3h",
        [
            (0.656233981, 0.0, 0.568315298),
            (0.656233981, 0.0, -0.568315298),
            (-0.32811699, 0.568315298, 0.568315298),
            (-0.32811699, 0.568315298, -0.568315298),
            (-0.32811699, -0.568315298, 0.568315298),
            (-0.32811699, -0.568315298, -0.568315298),
            (0.0, 0.0, 1.496370293),
            (0.0, 0.0, -1.496370293),
        ],
        _ORIGIN,
    ),
    (
        "JBTP-8",
        "Biaugmented Trigonal Prism (J50)",
        "C2v",
        [
            (0.647117793, 0.0, 0.604029879),
            (-0.647117793, 0.0, 0.604029879),
            (0.647117793, 0.647117793, -0.516811012),
            (-0.647117793, 0.647117793, -0.516811012),
            (0.647117793, -0.647117793, -0.516811012),
            (-0.647117793, -0.647117793, -0.516811012),
            (0.0, 1.116113114, 0.501190826),
            (0.0, -1.116113114, 0.501190826),
        ],
        (0.0, 0.0, -0.14319736),
    ),
    (
        "BTPR-8",
        "Biaugmented Trigonal Prism",
        "C2v",
        [
            (0.699237878, 0.0, 0.688732178),
            (-0.699237878, 0.0, 0.688732178),
            (0.699237878, 0.699237878, -0.522383347),
            (-0.699237878, 0.699237878, -0.522383347),
            (0.699237878, -0.699237878, -0.522383347),
            (-0.699237878, -0.699237878, -0.522383347),
            (0.0, 0.925004727, 0.415373591),
            (0.0, -0.925004727, 0.415373591),
        ],
        (0.0, 0.0, -0.118678149),
    ),
    (
        "JSD-8",
        "Snub Disphenoid (J84)",
        "D2d",
        [
            (-0.652225623, 0.0, -1.022598827),
            (0.652225623, 0.0, -1.022598827),
            (0.840828401, 0.0, 0.268145245),
            (-0.840828401, 0.0, 0.268145245),
            (0.0, -0.652225623, 1.022598102),
            (0.0, 0.652225623, 1.022598102),
            (0.0, -0.840828401, -0.268144665),
            (0.0, 0.840828401, -0.268144665),
        ],
        (0.0, 0.0, 0.00000029),
    ),
    (
        "TT-8",
        "Triakis Tetrahedron",
        "Td",
        [
            (0.0, 0.0, 0.95198935),
            (-0.8974155, 0.0, -0.317824239),
            (0.448707702, -0.777184634, -0.317824239),
            (0.448707702, 0.777184634, -0.317824239),
            (0.0, 0.0, -1.159193629),
            (1.092673129, 0.0, 0.386903234),
            (-0.546336517, 0.946282697, 0.386903234),
            (-0.546336517, -0.946282697, 0.386903234),
        ],
        (0.0, 0.0, -0.000032707),
    ),
    (
        "ETBPY-8",
        "Elongated Trigonal Bipyramid",
        "D3h",
        [
            (0.656233981, 0.0, 0.568315298),
            (0.656233981, 0.0, -0.568315298),
            (-0.32811699, 0.568315298, 0.568315298),
            (-0.32811699, 0.568315298, -0.568315298),
            (-0.32811699, -0.568315298, 0.568315298),
            (-0.32811699, -0.568315298, -0.568315298),
            (0.0, 0.0, 1.496370293),
            (0.0, 0.0, -1.496370293),
        ],
        _ORIGIN,
    ),
    (
        "JTC-9",
        "Triangular Cupola (J3)",
        "C3v",
        [
            (1.091089451, 0.0, 0.267261242),
            (0.545544726, 0.944911183, 0.267261242),
            (-0.545544726, 0.944911183, 0.267261242),
            (-1.091089451, 0.0, 0.267261242),
            (-0.545544726, -0.944911183, 0.267261242),
            (0.545544726, -0.944911183, 0.267261242),
            (0.545544726, 0.314970394, -0.623609564),
            (-0.545544726, 0.314970394, -0.623609564),
            (0.0, -0.629940788, -0.623609564),
        ],
        (0.0, 0.0, 0.267261242),
    ),
    (
        "JCCU-9",
        "Capped Cube (J8)",
        "C4v",
        [
            (0.826960652, 0.0, 0.443578471),
            (0.826960652, 0.0, -0.725920499),
            (0.0, 0.826960652, 0.443578471),
            (0.0, 0.826960652, -0.725920499),
            (-0.826960652, 0.0, 0.443578471),
            (-0.826960652, 0.0, -0.725920499),
            (0.0, -0.826960652, 0.443578471),
            (0.0, -0.826960652, -0.725920499),
            (0.0, 0.0, 1.270539123),
        ],
        (0.0, 0.0, -0.141171014),
    ),
    (
        "CCU-9",
        "Capped Cube",
        "C4v",
        [
            (0.676580145, 0.676580145, 0.433150734),
            (0.676580145, -0.676580145, 0.433150734),
            (-0.676580145, 0.676580145, 0.433150734),
            (-0.676580145, -0.676580145, 0.433150734),
            (0.567844822, 0.567844822, -0.692079759),
            (0.567844822, -0.567844822, -0.692079759),
            (-0.567844822, 0.567844822, -0.692079759),
            (-0.567844822, -0.567844822, -0.692079759),
            (0.0, 0.0, 1.044926731),
        ],
        (0.0, 0.0, -0.009210631),
    ),
    (
        "JCSAPR-9",
        "Capped Square Antiprism (J10)",
        "C4v",
        [
            (0.873140643, 0.0, 0.65840385),
            (0.61740367, 0.61740367, -0.379941215),
            (0.0, 0.873140643, 0.65840385),
            (-0.61740367, 0.61740367, -0.379941215),
            (-0.873140643, 0.0, 0.65840385),
            (-0.61740367, -0.61740367, -0.379941215),
            (0.0, -0.873140643, 0.65840385),
            (0.61740367, -0.61740367, -0.379941215),
            (0.0, 0.0, -1.253081859),
        ],
        (0.0, 0.0, 0.139231318),
    ),
    (
        "CSAPR-9",
        "Capped Square Antiprism",
        "C4v",
        [
            (0.0, 0.0, 1.053083143),
            (0.982653582, 0.0, 0.380440157),
            (0.0, 0.982653582, 0.380440157),
            (-0.982653582, 0.0, 0.380440157),
            (0.0, -0.982653582, 0.380440157),
            (0.59091969, 0.59091969, -0.643458455),
            (-0.59091969, 0.59091969, -0.643458455),
            (-0.59091969, -0.59091969, -0.643458455),
            (0.59091969, -0.59091969, -0.643458455),
        ],
        (0.0, 0.0, -0.001009948),
    ),
    (
        "JTCTPR-9",
        "Tricapped Trigonal Prism (J51)",
        "D3h",
        [
            (0.621382008, 0.621382008, 0.358755069),
            (-0.621382008, 0.621382008, 0.358755069),
            (0.621382008, -0.621382008, 0.358755069),
            (-0.621382008, -0.621382008, 0.358755069),
            (0.0, 0.621382008, -0.717510139),
            (0.0, -0.621382008, -0.717510139),
            (1.071725433, 0.0, -0.618760966),
            (-1.071725433, 0.0, -0.618760966),
            (0.0, 0.0, 1.237521934),
        ],
        _ORIGIN,
    ),
    (
        "TCTPR-9",
        "Tricapped Trigonal Prism",
        "D3h",
        [
            (0.702728369, 0.0, 0.785674201),
            (-0.351364184, 0.608580619, 0.785674201),
            (-0.351364184, -0.608580619, 0.785674201),
            (0.702728369, 0.0, -0.785674201),
            (-0.351364184, 0.608580619, -0.785674201),
            (-0.351364184, -0.608580619, -0.785674201),
            (-1.054092553, 0.0, 0.0),
            (0.527046277, 0.912870929, 0.0),
            (0.527046277, -0.912870929, 0.0),
        ],
        _ORIGIN,
    ),
    (
        "JTDIC-9",
        "Tridiminished Icosahedron (J63)",
        "C3v",
        [
            (-0.262672206, 0.919451308, -0.425012557),
            (-0.915286549, 0.021204725, -0.425012557),
            (-0.262672206, -0.877041857, -0.425012557),
            (0.793279982, -0.533942193, -0.425012557),
            (0.97365815, 0.021204725, 0.519459792),
            (0.321043807, 0.919451308, 0.519459792),
            (-0.734908381, -0.533942193, 0.519459792),
            (0.029185801, 0.021204725, -1.008728571),
            (0.029185801, 0.021204725, 1.103175806),
        ],
        (0.029185801, 0.021204725, 0.047223617),
    ),
    (
        "HH-9",
        "Hula-hoop",
        "C2v",
        [
            (1.057244898, 0.0, 0.077395698),
            (0.528622449, 0.915600936, 0.077395698),
            (-0.528622449, 0.915600936, 0.077395698),
            (-1.057244898, 0.0, 0.077395698),
            (-0.528622449, -0.915600936, 0.077395698),
            (0.528622449, -0.915600936, 0.077395698),
            (0.0, 0.0, 1.134640596),
            (0.528622449, 0.0, -0.838205242),
            (-0.528622449, 0.0, -0.838205242),
        ],
        (0.0, 0.0, 0.077395698),
    ),
    (
        "MFF-9",
        "Muffin",
        "Cs",
        [
            (0.0, 1.042109568, 0.21299287),
            (0.9908639, 0.32217162, 0.21299287),
            (0.612400433, -0.842614003, 0.21299287),
            (-0.612400433, -0.842614003, 0.21299287),
            (-0.9908639, 0.32217162, 0.21299287),
            (-0.612400433, -0.354163418, -0.737452601),
            (0.612400433, -0.354163418, -0.737452601),
            (0.0, 0.706514131, -0.737452601),
            (0.0, 0.000293952, 1.100973498),
        ],
        (0.0, 0.000293952, 0.046419953),
    ),
    (
        "JBCCU-10",
        "Bicapped Cube (J15)",
        "D4h",
        [
            (0.785488, 0.0, 0.555424),
            (0.785488, 0.0, -0.555424),
            (0.0, 0.785488, 0.555424),
            (0.0, 0.785488, -0.555424),
            (-0.785488, 0.0, 0.555424),
            (-0.785488, 0.0, -0.555424),
            (0.0, -0.785488, 0.555424),
            (0.0, -0.785488, -0.555424),
            (0.0, 0.0, 1.340913),
            (0.0, 0.0, -1.340913),
        ],
        _ORIGIN,
    ),
    (
        "JBCSAPR-10",
        "Bicapped Square Antiprism (J17)",
        "D4d",
        [
            (0.831395, 0.0, 0.49435),
            (0.587885, 0.587885, -0.49435),
            (0.0, 0.831395, 0.49435),
            (-0.587885, 0.587885, -0.49435),
            (-0.831395, 0.0, 0.49435),
            (-0.587885, -0.587885, -0.49435),
            (0.0, -0.831395, 0.49435),
            (0.587885, -0.587885, -0.49435),
            (0.0, 0.0, 1.325745),
            (0.0, 0.0, -1.325745),
        ],
        _ORIGIN,
    ),
    (
        "JMBIC-10",
        "Metabidiminished Icosahedron (J62)",
        "C2v",
        [
            (-0.797541, -0.588213, -0.373113),
            (-0.917507, 0.299842, 0.279142),
            (-0.042218, 0.961291, 0.121562),
            (0.15186, -0.475674, -0.933829),
            (0.548711, -0.584891, 0.811695),
            (-0.085441, 0.301899, 1.011328),
            (0.108597, -1.135033, -0.043961),
            (0.863981, 0.414498, 0.450639),
            (-0.482332, 0.411183, -0.734149),
            (0.618676, 0.482007, -0.628091),
        ],
        _ORIGIN,
    ),
    (
        "JATDI-10",
        "Augmented Tridiminished Icosahedron (J64)",
        "C3v",
        [
            (-0.00138, -0.28782, -0.953537),
            (-0.508204, -0.874651, -0.286524),
            (0.005406, -0.863863, 0.597917),
            (0.829615, -0.270393, 0.477497),
            (0.508402, 0.681753, 0.28691),
            (-0.005208, 0.670964, -0.597531),
            (-0.825215, -0.278511, 0.481717),
            (0.514536, -0.869597, -0.289125),
            (-0.514338, 0.676698, 0.289511),
            (-0.003712, 1.511869, -0.007028),
        ],
        _ORIGIN,
    ),
    (
        "JSPC-10",
        "Sphenocorona (J87)",
        "C2v",
        [
            (-1.001872, -0.08383, -0.581156),
            (-1.002035, -0.076631, 0.581869),
            (-0.516334, 0.802168, -0.005029),
            (0.028693, 0.335227, -0.920231),
            (-0.064316, -0.772041, -0.57676),
            (-0.064478, -0.76483, 0.586265),
            (0.028438, 0.346602, 0.916012),
            (0.642643, 0.705054, -0.004284),
            (0.974705, -0.24946, -0.579854),
            (0.974554, -0.242261, 0.583171),
        ],
        _ORIGIN,
    ),
    (
        "SDD-10",
        "Staggered Dodecahedron 2:6:2",
        "D2",
        [
            (-0.524414, 0.908285, 0.0),
            (0.524414, 0.908285, 0.0),
            (-1.048828, 0.0, 0.0),
            (1.048828, 0.0, 0.0),
            (-0.524414, -0.908285, 0.0),
            (0.524414, -0.908285, 0.0),
            (-0.524414, 0.0, 0.908285),
            (0.524414, 0.0, 0.908285),
            (0.262207, 0.454143, -0.908285),
            (-0.262207, -0.454143, -0.908285),
        ],
        _ORIGIN,
    ),
    (
        "TD-10",
        "Tetradecahedron 2:6:2",
        "C2v",
        [
            (-0.524414, 0.908284, 0.0),
            (0.524414, 0.908284, 0.0),
            (-1.048827, 0.0, 0.0),
            (1.048827, 0.0, 0.0),
            (-0.524414, -0.908284, 0.0),
            (0.524414, -0.908284, 0.0),
            (-0.524414, 0.0, 0.908284),
            (0.524414, 0.0, 0.908284),
            (0.0, 0.524414, -0.908284),
            (0.0, -0.524414, -0.908284),
        ],
        _ORIGIN,
    ),
    (
        "HD-10",
        "Hexadecahedron 2:6:2",
        "D4h",
        [
            (-0.524414, 0.908284, 0.0),
            (0.524414, 0.908284, 0.0),
            (-1.048827, 0.0, 0.0),
            (1.048827, 0.0, 0.0),
            (-0.524414, -0.908284, 0.0),
            (0.524414, -0.908284, 0.0),
            (-0.524414, 0.0, 0.908284),
            (0.524414, 0.0, 0.908284),
            (-0.524414, 0.0, -0.908284),
            (0.524414, 0.0, -0.908284),
        ],
        _ORIGIN,
    ),
    (
        "JCPPR-11",
        "Capped Pentagonal Prism (J9)",
        "C5v",
        [
            (0.900823, 0.0, 0.438971),
            (0.900823, 0.0, -0.62001),
            (0.27837, 0.856734, 0.438971),
            (0.27837, 0.856734, -0.62001),
            (-0.728781, 0.529491, 0.438971),
            (-0.728781, 0.529491, -0.62001),
            (-0.728781, -0.529491, 0.438971),
            (-0.728781, -0.529491, -0.62001),
            (0.27837, -0.856734, 0.438971),
            (0.27837, -0.856734, -0.62001),
            (0.0, 0.0, 0.995711),
        ],
        _ORIGIN,
    ),
    (
        "JCPAPR-11",
        "Capped Pentagonal Antiprism (J11)",
        "C5v",
        [
            (0.937758, 0.0, 0.556249),
            (0.758662, 0.5512, -0.381508),
            (0.289783, 0.89186, 0.556249),
            (-0.289783, 0.89186, -0.381508),
            (-0.758662, 0.5512, 0.556249),
            (-0.937758, 0.0, -0.381508),
            (-0.758662, -0.5512, 0.556249),
            (-0.289783, -0.89186, -0.381508),
            (0.289783, -0.89186, 0.556249),
            (0.758662, -0.5512, -0.381508),
            (0.0, 0.0, -0.961074),
        ],
        _ORIGIN,
    ),
    (
        "JAPPR-11",
        "Augmented Pentagonal Prism (J52)",
        "C2v",
        [
            (0.0, -1.305264, 0.0),
            (0.0, 0.986976, 0.510294),
            (0.825655, 0.386871, 0.510294),
            (0.510294, -0.583708, 0.510294),
            (-0.510294, -0.583708, 0.510294),
            (-0.825655, 0.386871, 0.510294),
            (0.0, 0.986976, -0.510294),
            (0.825655, 0.386871, -0.510294),
            (0.510294, -0.583708, -0.510294),
            (-0.510294, -0.583708, -0.510294),
            (-0.825655, 0.386871, -0.510294),
        ],
        _ORIGIN,
    ),
    (
        "JASPC-11",
        "Augmented Sphenocorona (J87)",
        "Cs",
        [
            (-0.549649, -0.001864, 0.864507),
            (0.549649, -0.001864, 0.864507),
            (0.0, 0.867614, 0.476754),
            (-0.867816, 0.476159, -0.072895),
            (-0.549649, -0.57609, -0.072895),
            (0.549649, -0.57609, -0.072895),
            (0.867816, 0.476159, -0.072895),
            (0.0, 0.867614, -0.622545),
            (-0.549649, -0.001864, -1.010297),
            (0.549649, -0.001864, -1.010297),
            (0.0, -0.951821, 0.801846),
        ],
        _ORIGIN,
    ),
    (
        "TT-12",
        "Truncated Tetrahedron",
        "Td",
        [
            (0.0, 0.443813, -0.941469),
            (0.443813, 0.887625, -0.313823),
            (-0.443813, 0.887625, -0.313823),
            (0.0, -0.443813, -0.941469),
            (0.443813, -0.887625, -0.313823),
            (-0.443813, -0.887625, -0.313823),
            (0.887625, 0.443813, 0.313823),
            (0.887625, -0.443813, 0.313823),
            (0.443813, 0.0, 0.941469),
            (-0.887625, 0.443813, 0.313823),
            (-0.887625, -0.443813, 0.313823),
            (-0.443813, 0.0, 0.941469),
        ],
        _ORIGIN,
    ),
    (
        "ACOC-12",
        "Anticuboctahedron (J27)",
        "D3h",
        [
            (0.600925, 0.0, -0.849837),
            (-0.300463, 0.520416, -0.849837),
            (-0.300463, -0.520416, -0.849837),
            (0.901388, 0.520416, 0.0),
            (0.0, 1.040833, 0.0),
            (-0.901388, 0.520416, 0.0),
            (-0.901388, -0.520416, 0.0),
            (0.0, -1.040833, 0.0),
            (0.901388, -0.520416, 0.0),
            (0.600925, 0.0, 0.849837),
            (-0.300463, 0.520416, 0.849837),
            (-0.300463, -0.520416, 0.849837),
        ],
        _ORIGIN,
    ),
    (
        "JSC-12",
        "Square Cupola (J4)",
        "C4v",
        [
            (1.141165, 0.0, 0.190029),
            (0.806926, 0.806926, 0.190029),
            (0.0, 1.141165, 0.190029),
            (-0.806926, 0.806926, 0.190029),
            (-1.141165, 0.0, 0.190029),
            (-0.806926, -0.806926, 0.190029),
            (0.0, -1.141165, 0.190029),
            (0.806926, -0.806926, 0.190029),
            (0.570583, 0.236343, -0.427565),
            (-0.236343, 0.570583, -0.427565),
            (-0.570583, -0.236343, -0.427565),
            (0.236343, -0.570583, -0.427565),
        ],
        _ORIGIN,
    ),
    (
        "JEPBPY-12",
        "Elongated Pentagonal Bipyramid (J16)",
        "D5h",
        [
            (0.891336, 0.0, 0.523914),
            (0.891336, 0.0, -0.523914),
            (0.275438, 0.847711, 0.523914),
            (0.275438, 0.847711, -0.523914),
            (-0.721106, 0.523914, 0.523914),
            (-0.721106, 0.523914, -0.523914),
            (-0.721106, -0.523914, 0.523914),
            (-0.721106, -0.523914, -0.523914),
            (0.275438, -0.847711, 0.523914),
            (0.275438, -0.847711, -0.523914),
            (0.0, 0.0, 1.07479),
            (0.0, 0.0, -1.07479),
        ],
        _ORIGIN,
    ),
    (
        "JBAPPR-12",
        "Biaugmented Pentagonal Prism (J53)",
        "C2v",
        [
            (0.852576, 0.48934, -0.061742),
            (0.277323, 0.48934, 0.730026),
            (-0.653457, 0.48934, 0.427597),
            (-0.653457, 0.48934, -0.551082),
            (0.277323, 0.48934, -0.853511),
            (0.852576, -0.48934, -0.061742),
            (0.277323, -0.48934, 0.730026),
            (-0.653457, -0.48934, 0.427597),
            (-0.653457, -0.48934, -0.551082),
            (0.277323, -0.48934, -0.853511),
            (-1.345488, 0.0, -0.061742),
            (1.124814, 0.0, 0.740907),
        ],
        _ORIGIN,
    ),
    (
        "JSPMC-12",
        "Sphenomegacorona (J88)",
        "C2v",
        [
            (-0.506162, -0.030252, -0.601961),
            (-0.865277, 0.700144, 0.0),
            (0.0, 0.841196, -0.506162),
            (-1.298915, -0.2146, 0.0),
            (0.506162, -0.030252, -0.601961),
            (-0.506162, -0.844158, 0.0),
            (0.0, 0.841196, 0.506162),
            (-0.506162, -0.030252, 0.601961),
            (0.865277, 0.700144, 0.0),
            (0.506162, -0.844158, 0.0),
            (0.506162, -0.030252, 0.601961),
            (1.298915, -0.2146, 0.0),
        ],
        _ORIGIN,
    ),
]
