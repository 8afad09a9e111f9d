"""Seed data for the Medellín - Bello campaign catalog."""

# Anchors approximate the geography: Bello to the north, Medellín comunas
# to the south. Axial (hex_q, hex_r) positions lay the same zones out on
# a schematic grid.
ZONE_RECORDS: list[dict] = [
    # BELLO (northern cluster)
    {
        "id": "b-04",
        "name": "Bello - París",
        "municipality": "Bello",
        "population": 65000,
        "demographic_density": 0.88,
        "historical_support": 0.28,
        "latitude": 6.3470,
        "longitude": -75.5640,
        "hex_q": 1,
        "hex_r": 0,
        "target_audience": "Mujeres jóvenes estrato 1-2",
        "strategic_message": "Seguridad en el barrio y oportunidades de empleo",
    },
    {
        "id": "b-01",
        "name": "Bello - Norte",
        "municipality": "Bello",
        "population": 95000,
        "demographic_density": 0.82,
        "historical_support": 0.48,
        "latitude": 6.3560,
        "longitude": -75.5560,
        "hex_q": 2,
        "hex_r": 0,
        "target_audience": "Reserva activa y familias",
        "strategic_message": "Orden, autoridad y respaldo a la fuerza pública",
    },
    {
        "id": "b-03",
        "name": "Bello - Niquía",
        "municipality": "Bello",
        "population": 105000,
        "demographic_density": 0.78,
        "historical_support": 0.35,
        "latitude": 6.3440,
        "longitude": -75.5470,
        "hex_q": 3,
        "hex_r": 0,
        "target_audience": "Madres cabeza de familia",
        "strategic_message": "Apoyo a la economía del hogar",
    },
    {
        "id": "b-02",
        "name": "Bello - Centro",
        "municipality": "Bello",
        "population": 110000,
        "demographic_density": 0.65,
        "historical_support": 0.52,
        "latitude": 6.3370,
        "longitude": -75.5580,
        "hex_q": 2,
        "hex_r": 1,
        "target_audience": "Comerciantes y líderes deportivos",
        "strategic_message": "Deporte y comercio como motor local",
    },
    # MEDELLÍN NORTH (connecting to Bello)
    {
        "id": "m-01",
        "name": "C1 - Popular",
        "municipality": "Medellín",
        "population": 132000,
        "demographic_density": 0.75,
        "historical_support": 0.45,
        "latitude": 6.2930,
        "longitude": -75.5470,
        "hex_q": 3,
        "hex_r": 2,
        "target_audience": "Jóvenes primer votante",
    },
    {
        "id": "m-02",
        "name": "C2 - Santa Cruz",
        "municipality": "Medellín",
        "population": 110000,
        "demographic_density": 0.68,
        "historical_support": 0.38,
        "latitude": 6.2960,
        "longitude": -75.5560,
        "hex_q": 2,
        "hex_r": 2,
    },
    {
        "id": "m-04",
        "name": "C4 - Aranjuez",
        "municipality": "Medellín",
        "population": 140000,
        "demographic_density": 0.45,
        "historical_support": 0.58,
        "latitude": 6.2790,
        "longitude": -75.5560,
        "hex_q": 2,
        "hex_r": 3,
    },
    {
        "id": "m-03",
        "name": "C3 - Manrique",
        "municipality": "Medellín",
        "population": 155000,
        "demographic_density": 0.55,
        "historical_support": 0.62,
        "latitude": 6.2770,
        "longitude": -75.5440,
        "hex_q": 3,
        "hex_r": 3,
    },
    # MEDELLÍN CENTER / SOUTH
    {
        "id": "m-10",
        "name": "C10 - Candelaria",
        "municipality": "Medellín",
        "population": 85000,
        "demographic_density": 0.35,
        "historical_support": 0.25,
        "latitude": 6.2470,
        "longitude": -75.5680,
        "hex_q": 2,
        "hex_r": 4,
    },
    {
        "id": "m-16",
        "name": "C16 - Belén",
        "municipality": "Medellín",
        "population": 190000,
        "demographic_density": 0.65,
        "historical_support": 0.55,
        "latitude": 6.2310,
        "longitude": -75.6000,
        "hex_q": 1,
        "hex_r": 5,
        "target_audience": "Adulto mayor pensionado",
        "strategic_message": "Pensiones dignas y salud",
    },
    {
        "id": "m-14",
        "name": "C14 - El Poblado",
        "municipality": "Medellín",
        "population": 128000,
        "demographic_density": 0.15,
        "historical_support": 0.85,
        "latitude": 6.2080,
        "longitude": -75.5670,
        "hex_q": 3,
        "hex_r": 5,
    },
]


SEGMENT_RECORDS: list[dict] = [
    {"id": "s1", "name": "Mujeres (18-35) - Estrato 1-2", "active": True, "weight": 1.4},
    {"id": "s2", "name": "Reserva Activa / Fuerza Pública", "active": True, "weight": 1.6},
    {"id": "s3", "name": "Líderes Deportivos / Clubes", "active": True, "weight": 1.3},
    {"id": "s4", "name": "Madres Cabeza de Familia", "active": True, "weight": 1.4},
    {"id": "s5", "name": "Jóvenes Primer Votante", "active": False, "weight": 1.0},
    {"id": "s6", "name": "Adulto Mayor - Pensionado", "active": False, "weight": 1.1},
]
