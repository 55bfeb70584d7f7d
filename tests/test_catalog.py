from guess_the_flag.catalog import (
    COUNTRIES,
    FLAG_LABELS,
    UNKNOWN_FLAG_LABEL,
    flag_image_path,
    flag_label,
)


def test_catalog_has_eleven_distinct_countries():
    assert len(COUNTRIES) == 11
    assert len(set(COUNTRIES)) == 11


def test_every_country_has_a_label():
    assert set(FLAG_LABELS) == set(COUNTRIES)


def test_labels_do_not_name_the_country():
    for country, label in FLAG_LABELS.items():
        assert country not in label


def test_known_country_label():
    assert flag_label('France') == (
        'Flag with three vertical stripes. Left stripe blue, middle stripe white, right stripe red.'
    )


def test_unknown_country_label():
    assert flag_label('Atlantis') == UNKNOWN_FLAG_LABEL == 'Unknown flag'


def test_flag_image_path_found(tmp_path):
    (tmp_path / 'Italy.jpg').write_bytes(b'')
    assert flag_image_path('Italy', tmp_path) == tmp_path / 'Italy.jpg'


def test_flag_image_path_prefers_png(tmp_path):
    (tmp_path / 'Spain.jpg').write_bytes(b'')
    (tmp_path / 'Spain.png').write_bytes(b'')
    assert flag_image_path('Spain', tmp_path) == tmp_path / 'Spain.png'


def test_flag_image_path_missing(tmp_path):
    assert flag_image_path('UK', tmp_path) is None
