"""
Тесты для Induced Prism

Проверяет:
1. Правило Прентиса в матричной форме (знаковые компоненты)
2. Клинические базы для OD / OS
3. Эталонные значения отчёта с округлением до 0.001Δ
4. Эквивалентность осей 0° и 180°
"""

import math

import pytest

from opticalc.core.domain import (
    Decentration,
    Eye,
    HorizontalBase,
    PowerComponents,
    SpheroCyl,
    VerticalBase,
)
from opticalc.core.optics import PowerMatrix, adjusted_decentration_mm, induced_prism


class TestAdjustedDecentration:
    """Тесты поправки децентрации на глаз"""

    def test_od_unchanged(self) -> None:
        """OD: горизонтальная компонента без изменений"""
        dec = Decentration(horizontal_mm=2.0, vertical_mm=-1.0)
        assert adjusted_decentration_mm(Eye.OD, dec) == (2.0, -1.0)

    def test_os_nasal_flip(self) -> None:
        """OS: горизонтальная компонента меняет знак"""
        dec = Decentration(horizontal_mm=2.0, vertical_mm=-1.0)
        assert adjusted_decentration_mm(Eye.OS, dec) == (-2.0, -1.0)


class TestInducedPrismReference:
    """Эталонные случаи"""

    def test_os_oblique_cylinder(self) -> None:
        """OS, +2.00 / -1.00 x 26, 1 мм in, 3 мм up"""
        lens = SpheroCyl(sphere=2.0, cylinder=-1.0, axis_deg=26.0)
        dec = Decentration(horizontal_mm=1.0, vertical_mm=3.0)

        p = induced_prism(Eye.OS, lens, dec)

        assert p.prism.horizontal_prism == pytest.approx(0.0625, abs=1e-4)
        assert p.prism.vertical_prism == pytest.approx(-0.31825, abs=1e-4)
        hmag, hbase = p.horizontal()
        vmag, vbase = p.vertical()
        assert hmag == pytest.approx(0.0625, abs=1e-4)
        assert hbase == HorizontalBase.IN
        assert vmag == pytest.approx(0.31825, abs=1e-4)
        assert vbase == VerticalBase.UP

    def test_od_oblique_cylinder(self) -> None:
        """OD, +2.00 / -1.00 x 26, 1 мм in, 3 мм up"""
        lens = SpheroCyl(sphere=2.0, cylinder=-1.0, axis_deg=26.0)
        dec = Decentration(horizontal_mm=1.0, vertical_mm=3.0)

        p = induced_prism(Eye.OD, lens, dec)

        assert p.prism.horizontal_prism == pytest.approx(-0.2989, abs=1e-4)
        assert p.prism.vertical_prism == pytest.approx(-0.397, abs=1e-4)
        assert p.horizontal()[1] == HorizontalBase.IN
        assert p.vertical()[1] == VerticalBase.UP

    def test_negative_axis_and_decentration(self) -> None:
        """OD, -2.00 / -3.40 x -5 (= 175), 1.5 мм out, 3 мм down"""
        lens = SpheroCyl(sphere=-2.0, cylinder=-3.4, axis_deg=-5.0)
        dec = Decentration(horizontal_mm=-1.5, vertical_mm=-3.0)

        p = induced_prism(Eye.OD, lens, dec)

        hmag, hbase = p.horizontal()
        vmag, vbase = p.vertical()
        assert hmag == pytest.approx(0.392434, abs=1e-4)
        assert hbase == HorizontalBase.IN
        assert vmag == pytest.approx(1.6565, abs=1e-4)
        assert vbase == VerticalBase.UP

    def test_report_reference_values(self) -> None:
        """OD, +2.00 / -1.00 x 25, 2 мм in, 1 мм down: отчёт 0.001Δ"""
        lens = SpheroCyl(sphere=2.0, cylinder=-1.0, axis_deg=25.0)
        dec = Decentration(horizontal_mm=2.0, vertical_mm=-1.0)

        p = induced_prism(Eye.OD, lens, dec)
        report = p.report()

        assert p.prism.horizontal_prism == pytest.approx(-0.3259765, abs=1e-6)
        assert p.prism.vertical_prism == pytest.approx(0.0412562, abs=1e-6)
        assert report.horizontal_prism == 0.326
        assert report.horizontal_base == HorizontalBase.IN
        assert report.vertical_prism == 0.041
        assert report.vertical_base == VerticalBase.DOWN
        assert report.magnitude == 0.329
        assert report.power_components == PowerComponents(px=1.821, pt=0.383, py=1.179)

    def test_power_components_full_precision(self) -> None:
        """Элементы матрицы хранятся без округления"""
        lens = SpheroCyl(sphere=2.0, cylinder=-1.0, axis_deg=25.0)
        p = induced_prism(Eye.OD, lens, Decentration(horizontal_mm=2.0, vertical_mm=-1.0))
        m = PowerMatrix.from_spherocyl(lens)
        assert (p.power_components.px, p.power_components.pt, p.power_components.py) == (m.px, m.pt, m.py)

    def test_deterministic(self) -> None:
        """Повторный вызов даёт бит-в-бит тот же результат"""
        lens = SpheroCyl(sphere=2.0, cylinder=-1.0, axis_deg=25.0)
        dec = Decentration(horizontal_mm=2.0, vertical_mm=-1.0)
        assert induced_prism(Eye.OD, lens, dec) == induced_prism(Eye.OD, lens, dec)


class TestInducedPrismProperties:
    """Свойства правила Прентиса"""

    def test_zero_lens_zero_decentration(self) -> None:
        """Нет силы и нет децентрации — нет призмы"""
        p = induced_prism(Eye.OD, SpheroCyl(sphere=0.0), Decentration(horizontal_mm=0.0, vertical_mm=0.0))
        assert p.prism.horizontal_prism == pytest.approx(0.0, abs=1e-12)
        assert p.prism.vertical_prism == pytest.approx(0.0, abs=1e-12)
        assert p.prism.magnitude == 0.0
        assert p.horizontal() is None
        assert p.vertical() is None

    def test_pure_sphere_horizontal_od_vs_os(self) -> None:
        """+3.00 DS, 5 мм in: 1.5Δ Base In для обоих глаз"""
        lens = SpheroCyl(sphere=3.0)
        dec = Decentration(horizontal_mm=5.0, vertical_mm=0.0)

        p_od = induced_prism(Eye.OD, lens, dec)
        assert p_od.prism.horizontal_prism == pytest.approx(-1.5, abs=1e-9)
        assert p_od.prism.vertical_prism == pytest.approx(0.0, abs=1e-9)
        assert p_od.horizontal() == (pytest.approx(1.5), HorizontalBase.IN)

        p_os = induced_prism(Eye.OS, lens, dec)
        assert p_os.prism.horizontal_prism == pytest.approx(1.5, abs=1e-9)
        assert p_os.horizontal() == (pytest.approx(1.5), HorizontalBase.IN)

    def test_minus_sphere_nasal_decentration_base_out(self) -> None:
        """-4.00 DS, 2 мм in: 0.8Δ Base Out"""
        lens = SpheroCyl(sphere=-4.0)
        dec = Decentration(horizontal_mm=2.0, vertical_mm=0.0)
        for eye in Eye:
            hmag, hbase = induced_prism(eye, lens, dec).horizontal()
            assert hmag == pytest.approx(0.8)
            assert hbase == HorizontalBase.OUT

    def test_pure_cylinder_vertical_axis_0_or_180(self) -> None:
        """-2.00 DC x 180, 4 мм up: 0.8Δ Base Down; ось 0° идентична"""
        dec = Decentration(horizontal_mm=0.0, vertical_mm=4.0)

        p180 = induced_prism(Eye.OD, SpheroCyl(sphere=0.0, cylinder=-2.0, axis_deg=180.0), dec)
        p0 = induced_prism(Eye.OD, SpheroCyl(sphere=0.0, cylinder=-2.0, axis_deg=0.0), dec)

        assert p180.prism.vertical_prism == pytest.approx(0.8, abs=1e-9)
        assert p180.prism.horizontal_prism == pytest.approx(0.0, abs=1e-9)
        assert p180.vertical() == (pytest.approx(0.8), VerticalBase.DOWN)
        assert p0 == p180

    def test_pure_cylinder_horizontal_axis_90(self) -> None:
        """-2.00 DC x 90, 4 мм in (OD): горизонтальная сила -2.00 → 0.8Δ Base Out"""
        lens = SpheroCyl(sphere=0.0, cylinder=-2.0, axis_deg=90.0)
        dec = Decentration(horizontal_mm=4.0, vertical_mm=0.0)

        p = induced_prism(Eye.OD, lens, dec)

        assert p.prism.horizontal_prism == pytest.approx(0.8, abs=1e-9)
        assert p.prism.vertical_prism == pytest.approx(0.0, abs=1e-9)
        assert p.horizontal()[1] == HorizontalBase.OUT

    def test_magnitude_is_norm(self) -> None:
        """Модуль = sqrt(h² + v²)"""
        lens = SpheroCyl(sphere=-2.0, cylinder=-3.4, axis_deg=175.0)
        dec = Decentration(horizontal_mm=-1.5, vertical_mm=-3.0)
        p = induced_prism(Eye.OS, lens, dec).prism
        assert p.magnitude == pytest.approx(math.hypot(p.horizontal_prism, p.vertical_prism))

    def test_vertical_base_independent_of_eye(self) -> None:
        """Сфера, вертикальная децентрация: база одинакова для OD и OS"""
        lens = SpheroCyl(sphere=2.0)
        dec = Decentration(horizontal_mm=0.0, vertical_mm=3.0)
        od = induced_prism(Eye.OD, lens, dec).vertical()
        os_ = induced_prism(Eye.OS, lens, dec).vertical()
        assert od == os_
        assert od[1] == VerticalBase.UP
