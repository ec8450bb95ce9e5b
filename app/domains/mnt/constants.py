# app/domains/mnt/constants.py

"""
데이터베이스에 저장되지 않는 정적 마스터 데이터 (플랜트, 단위)를 정의하는 모듈입니다.
"""

from enum import Enum


# =============================================================================
# 1. 플랜트 (Plantas)
# =============================================================================
class Plant(str, Enum):
    """운영 중인 플랜트 목록. 값은 ubicacion.planta 컬럼에 저장되는 코드와 같습니다."""
    RANCO = "RANCO"
    CHIMBARONGO = "CHIMBARONGO"


# =============================================================================
# 2. 단위 (Unidades de medida)
# =============================================================================
class UnitOfMeasure(str, Enum):
    """
    자재에 사용되는 단위 목록입니다.
    멤버 이름은 표시용 이름 (소문자, '_' -> 공백), 값은 단위 코드로 사용됩니다.
    """
    KILOGRAMO = "KG"
    GRAMO = "GR"
    LITRO = "LT"
    MILILITRO = "ML"
    UNIDAD = "UN"
    CAJA = "CJ"
    ROLLO = "RL"
    METRO = "MT"
    METRO_CUADRADO = "M2"
    PAR = "PR"
