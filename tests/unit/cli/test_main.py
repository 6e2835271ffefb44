"""
Tests de punta a punta del CLI (src.cli.main).

Verifican la salida en stdout y el código de salida:
0 con totales impresos, 1 con un diagnóstico ❌ y sin totales.
"""

from pathlib import Path

import pytest

from src.cli.main import main


def _historial(tmp_path: Path, *lines: str) -> Path:
    path = tmp_path / "historial.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class TestMain:
    def test_dos_lineas_del_mismo_nombre(self, tmp_path, capsys):
        path = _historial(
            tmp_path,
            "Paid $1,200.00 to John Smith on 03/15/2023",
            "Paid $300.50 to John Smith on 04/01/2023",
        )
        main([str(path)])
        assert capsys.readouterr().out == "John Smith : 1500.50\n"

    def test_varios_nombres(self, tmp_path, capsys):
        path = _historial(
            tmp_path,
            "Paid $10.00 to Ann Lee on 01/02/2023",
            "Received $2,000 by Bob Ray on 02/29/2024",
            "Paid $5.25 to Ann Lee on 01/03/2023",
        )
        main([str(path)])
        salida = sorted(capsys.readouterr().out.splitlines())
        assert salida == ["Ann Lee : 15.25", "Bob Ray : 2000"]

    def test_monto_de_29_digitos_se_imprime_completo(self, tmp_path, capsys):
        path = _historial(tmp_path, "Paid $12345678901234567890123456789.01 to Ann Lee on 01/02/2023")
        main([str(path)])
        assert capsys.readouterr().out == "Ann Lee : 12345678901234567890123456789.01\n"

    def test_linea_sin_fecha_sale_con_codigo_1(self, tmp_path, capsys):
        path = _historial(tmp_path, "Paid $1,200.00 to John Smith yesterday")
        with pytest.raises(SystemExit) as exc_info:
            main([str(path)])

        assert exc_info.value.code == 1
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 1
        assert lines[0].startswith("❌ Transacción inválida, sin fecha:")
        assert "Paid $1,200.00 to John Smith yesterday" in lines[0]

    def test_linea_sin_monto_no_imprime_totales(self, tmp_path, capsys):
        path = _historial(
            tmp_path,
            "Paid $10.00 to Ann Lee on 01/02/2023",
            "Paid 20.00 to Bob Ray on 01/03/2023",
        )
        with pytest.raises(SystemExit) as exc_info:
            main([str(path)])

        assert exc_info.value.code == 1
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 1
        assert "sin monto" in lines[0]
        assert "Ann Lee : " not in lines[0]

    def test_archivo_inexistente(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "no_existe.txt")])
        assert exc_info.value.code == 1
        assert "❌ El archivo no existe" in capsys.readouterr().out

    @pytest.mark.parametrize("argv", [[], ["a.txt", "b.txt"], ["--help"], ["-h"], ["a.txt", "--help"]])
    def test_numero_de_argumentos_invalido(self, argv, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out.startswith("❌ Argumentos inválidos")
        assert "Traceback" not in captured.out + captured.err

    def test_verbose_no_ensucia_stdout(self, tmp_path, capsys):
        path = _historial(tmp_path, "Paid $10.00 to Ann Lee on 01/02/2023")
        main([str(path), "--verbose"])
        captured = capsys.readouterr()
        assert captured.out == "Ann Lee : 10.00\n"
        assert "RESUMEN DE PROCESAMIENTO" in captured.err
