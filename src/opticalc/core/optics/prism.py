"""
Induced Prism — правило Прентиса в матричной форме

    P = F · d

F — матрица силы линзы (PowerMatrix), d — вектор децентрации в сантиметрах.
Призма индуцируется с базой, противоположной направлению децентрации,
поэтому вектор берётся с минусом:

    horizontal = Px · (-in_adj) + Pt · (-up)
    vertical   = Pt · (-in_adj) + Py · (-up)

Для OS горизонтальная компонента децентрации (in = назально) меняет знак,
чтобы одинаковая физическая назальная децентрация давала зеркальный
результат для двух глаз.
"""

from opticalc.core.domain.prism import (
    ClinicalInducedPrism,
    Decentration,
    Eye,
    InducedPrism,
    PowerComponents,
)
from opticalc.core.domain.spherocyl import SpheroCyl
from opticalc.core.optics.power_matrix import PowerMatrix


def adjusted_decentration_mm(eye: Eye, decentration: Decentration) -> tuple[float, float]:
    """
    Вектор децентрации (in_adj, up) в миллиметрах с учётом глаза.

    OD: in без изменений; OS: in с обратным знаком.
    """
    in_mm = decentration.horizontal_mm
    if eye == Eye.OS:
        in_mm = -in_mm
    return in_mm, decentration.vertical_mm


def induced_prism(eye: Eye, lens: SpheroCyl, decentration: Decentration) -> ClinicalInducedPrism:
    """
    Индуцированная призма для децентрированной линзы.

    Args:
        eye: Глаз (OD / OS)
        lens: Рецептура линзы
        decentration: Децентрация оптического центра (мм)

    Returns:
        ClinicalInducedPrism с полноточными знаковыми компонентами и элементами
        матрицы силы; round-off до 0.001Δ — через .report()
    """
    m = PowerMatrix.from_spherocyl(lens)
    in_mm, up_mm = adjusted_decentration_mm(eye, decentration)

    # мм → см (÷10) по каждому слагаемому
    horizontal = (m.px * -in_mm / 10.0) + (m.pt * -up_mm / 10.0)
    vertical = (-m.pt * in_mm / 10.0) + (-m.py * up_mm / 10.0)

    return ClinicalInducedPrism(
        eye=eye,
        prism=InducedPrism.from_components(horizontal, vertical),
        power_components=PowerComponents(px=m.px, pt=m.pt, py=m.py),
    )
