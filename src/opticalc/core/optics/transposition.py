"""
Transposition — перевод рецептуры между minus- и plus-cylinder формой

Правила:
    S' = S + C
    C' = -C
    axis' = axis - 90, если axis >= 90, иначе axis + 90

Обе формы описывают одну и ту же оптическую силу. Транспозиция — инволюция:
transpose(transpose(rx)) == rx.
"""

from opticalc.core.domain.spherocyl import CylinderForm, SpheroCyl


def transpose(lens: SpheroCyl) -> SpheroCyl:
    """
    Транспозиция сферо-цилиндрической рецептуры.

    Examples:
        -3.50 / +2.00 x 150  →  -1.50 / -2.00 x 60

    Args:
        lens: Исходная рецептура

    Returns:
        Рецептура в противоположной форме записи цилиндра
    """
    if lens.axis_deg >= 90.0:
        new_axis = lens.axis_deg - 90.0
    else:
        new_axis = lens.axis_deg + 90.0

    return SpheroCyl(
        sphere=lens.sphere + lens.cylinder,
        cylinder=-lens.cylinder,
        axis_deg=new_axis,
    )


def to_minus_cylinder(lens: SpheroCyl) -> SpheroCyl:
    """Рецептура в minus-cylinder форме (транспозиция только для plus-формы)"""
    if lens.form == CylinderForm.PLUS:
        return transpose(lens)
    return lens


def to_plus_cylinder(lens: SpheroCyl) -> SpheroCyl:
    """Рецептура в plus-cylinder форме (транспозиция только для minus-формы)"""
    if lens.cylinder < 0:
        return transpose(lens)
    return lens
