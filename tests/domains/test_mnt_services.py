# tests/domains/test_mnt_services.py

"""
'mnt' 도메인의 변환 로직 (app/domains/mnt/services.py) 단위 테스트입니다.
"""

from datetime import date

import pytest

from app.domains.mnt import models as mnt_models
from app.domains.mnt import services as mnt_services


# --- 표시 코드 생성 ---
@pytest.mark.parametrize(
    "prefix, id, expected",
    [
        ("PROV", 7, "PROV007"),
        ("UB", 7, "UB007"),
        ("PROV", 42, "PROV042"),
        ("PROV", 1234, "PROV1234"),
    ],
)
def test_synthetic_code_pads_to_three_digits(prefix, id, expected):
    assert mnt_services.synthetic_code(prefix, id) == expected


# --- 공급업체 코드 해석 ---
@pytest.mark.parametrize(
    "code, expected",
    [
        ("PROV007", 7),
        ("PROV1234", 1234),
        ("PROV", None),
        ("Acme", None),
        ("PROV12A", None),
        ("prov007", None),
        ("PROV٠٠٧", None),
    ],
)
def test_supplier_id_from_code(code, expected):
    assert mnt_services.supplier_id_from_code(code) == expected


# --- activo 파라미터 ---
@pytest.mark.parametrize(
    "value, expected",
    [(None, True), ("true", True), ("TRUE", True), ("1", True), ("false", False), ("False", False), ("0", False)],
)
def test_parse_activo(value, expected):
    assert mnt_services.parse_activo(value) is expected


@pytest.mark.parametrize("value", ["yes", "", "ture", "2"])
def test_parse_activo_rejects_unknown_values(value):
    with pytest.raises(ValueError):
        mnt_services.parse_activo(value)


# --- 냉장 여부 ---
@pytest.mark.parametrize(
    "frio, expected",
    [("Si", True), ("Sí", True), ("No", False), ("si", False), ("", False), (None, False)],
)
def test_requires_cold_chain(frio, expected):
    assert mnt_services.requires_cold_chain(frio) is expected


# --- 행 변환 ---
def test_to_material_renames_fields():
    row = mnt_models.Material(
        id=5, codigo_ranco="MAT-9", nombre_material="Caja", unidad_medida="UN", frio="Sí", activo=True
    )
    material = mnt_services.to_material(row)
    assert material.model_dump() == {
        "id": 5,
        "codigo": "MAT-9",
        "nombre": "Caja",
        "unidad_medida": "UN",
        "requiere_frio": True,
        "activo": True,
    }


def test_to_supplier_synthesizes_code_and_blank_contact_fields():
    supplier = mnt_services.to_supplier(mnt_models.Supplier(id=7, title="Acme", activo=True))
    assert supplier.codigo == "PROV007"
    assert supplier.nombre == "Acme"
    assert supplier.rut is None
    assert supplier.contacto is None
    assert supplier.telefono is None
    assert supplier.email is None


def test_to_location_uses_fixed_type():
    location = mnt_services.to_location(
        mnt_models.Location(id=12, title="Camara", bodega_deposito="Frio", planta="RANCO", activo=True)
    )
    assert location.codigo == "UB012"
    assert location.bodega == "Frio"
    assert location.tipo == "bodega"


def test_to_active_season_maps_end_date():
    season = mnt_services.to_active_season(
        mnt_models.Season(
            id=3, title="2024-2025", fecha_inicio=date(2024, 10, 1), fecha_fin=date(2025, 4, 30), activo=True
        )
    )
    assert season.codigo == season.nombre == "2024-2025"
    assert season.fecha_termino == date(2025, 4, 30)
    assert season.activa is True


def test_to_movement_type_uses_title_as_code():
    movement_type = mnt_services.to_movement_type(
        mnt_models.MovementType(id=1, title="SALIDA", descripcion="Salida", activo=True)
    )
    assert movement_type.codigo == movement_type.nombre == "SALIDA"
    assert movement_type.descripcion == "Salida"


# --- 정적 목록 ---
def test_list_plants():
    plants = mnt_services.list_plants()
    assert [p.codigo for p in plants] == ["RANCO", "CHIMBARONGO"]
    assert plants[0].nombre == "RANCO"
    assert plants[0].descripcion == "Planta RANCO"


def test_list_units_of_measure_names_from_member_names():
    units = {u.codigo: u for u in mnt_services.list_units_of_measure()}
    assert units["KG"].nombre == "kilogramo"
    assert units["M2"].nombre == "metro cuadrado"
    assert units["M2"].descripcion == "M2"
