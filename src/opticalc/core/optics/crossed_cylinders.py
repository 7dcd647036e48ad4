"""
Crossed Cylinders — сложение косо скрещённых цилиндров

Две сферо-цилиндрические линзы, совмещённые в одной системе координат,
заменяются одной эквивалентной линзой: матрицы сил складываются
поэлементно, сумма раскладывается обратно в SpheroCyl.

Результат всегда в minus-cylinder форме (конвенция PowerMatrix.to_spherocyl),
поэтому сложение коммутативно и ассоциативно в этой форме.
"""

from functools import reduce
from typing import Iterable

from opticalc.core.domain.spherocyl import CylinderForm, SpheroCyl
from opticalc.core.optics.power_matrix import PowerMatrix


def crossed_cylinders(
    lens_a: SpheroCyl,
    lens_b: SpheroCyl,
    form: CylinderForm = CylinderForm.MINUS,
) -> SpheroCyl:
    """
    Эквивалентная рецептура двух совмещённых линз.

    Examples:
        -2.00 DC x 90 + -1.00 DC x 90 → plano / -3.00 x 90

    Args:
        lens_a: Первая линза
        lens_b: Вторая линза
        form: Форма записи результата (default: MINUS)

    Returns:
        SpheroCyl суммарной матрицы
    """
    total = PowerMatrix.from_spherocyl(lens_a) + PowerMatrix.from_spherocyl(lens_b)
    return total.to_spherocyl(form)


def combine_lenses(
    lenses: Iterable[SpheroCyl],
    form: CylinderForm = CylinderForm.MINUS,
) -> SpheroCyl:
    """
    Эквивалентная рецептура стопки из произвольного числа линз.

    Пустая стопка — плано-линза.
    """
    total = reduce(
        lambda acc, lens: acc + PowerMatrix.from_spherocyl(lens),
        lenses,
        PowerMatrix.zero(),
    )
    return total.to_spherocyl(form)
