"""Tests for the storefront-import command line tool."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from storefront.cli import import_products
from storefront.cli.import_products import main, print_result, run_import
from storefront.schemas.import_schemas import ImportResult, ImportRowError
from storefront.services.import_service import generate_sample_csv


class TestTemplateCommand:
    """Test the template subcommand."""

    def test_template_to_stdout(self, capsys):
        with patch("sys.argv", ["storefront-import", "template", "csv"]):
            assert main() == 0
        assert capsys.readouterr().out == generate_sample_csv()

    def test_template_to_file(self, tmp_path, capsys):
        output = tmp_path / "sample.json"
        with patch("sys.argv", ["storefront-import", "template", "json", "-o", str(output)]):
            assert main() == 0
        assert json.loads(output.read_text())["products"][0]["sku"] == "SKU001"
        assert "Template written to" in capsys.readouterr().out

    def test_no_command(self, capsys):
        with patch("sys.argv", ["storefront-import"]):
            assert main() == 1


class TestRunCommand:
    """Test the run subcommand."""

    @pytest.mark.asyncio
    async def test_dry_run_does_not_touch_database(self, tmp_path):
        path = tmp_path / "products.csv"
        path.write_text(generate_sample_csv())

        with patch.object(import_products, "init_db", new_callable=AsyncMock) as init_db:
            result = await run_import(path, dry_run=True)

        init_db.assert_not_awaited()
        assert result is not None
        assert result.success is True
        assert result.imported == 1

    @pytest.mark.asyncio
    async def test_run_uses_database_and_closes_it(self, tmp_path, product_store):
        path = tmp_path / "products.csv"
        path.write_text(generate_sample_csv())

        with patch.object(import_products, "init_db", new_callable=AsyncMock) as init_db, \
             patch.object(import_products, "close_db", new_callable=AsyncMock) as close_db, \
             patch.object(import_products, "create_product", product_store):
            result = await run_import(path)

        init_db.assert_awaited_once()
        close_db.assert_awaited_once()
        assert result.imported == 1
        assert product_store.product_ids == ["PROD001"]

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path, capsys):
        result = await run_import(tmp_path / "missing.csv", dry_run=True)
        assert result is None
        assert "not found" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_file_too_large(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("STOREFRONT_IMPORT_MAX_UPLOAD_MB", "1")
        path = tmp_path / "big.csv"
        path.write_text("product_id\n" + "P1\n" * 400_000)

        result = await run_import(path, dry_run=True)

        assert result is None
        assert "File too large" in capsys.readouterr().out

    def test_main_exit_code_on_row_errors(self, tmp_path, capsys):
        path = tmp_path / "products.json"
        path.write_text(json.dumps([{"product_id": "P1"}]))

        with patch("sys.argv", ["storefront-import", "run", str(path), "--dry-run"]):
            assert main() == 1
        out = capsys.readouterr().out
        assert "Imported 0 of 1 products. 1 failed." in out
        assert "Row 1 [P1]:" in out


def test_print_result_limits_errors(capsys):
    errors = [ImportRowError(row=i, product_id=f"P{i}", errors=["sku: SKU is required"]) for i in range(1, 6)]
    result = ImportResult(
        success=False, total=5, imported=0, failed=5, errors=errors,
        summary="Imported 0 of 5 products. 5 failed.",
    )

    print_result(result, max_errors=2)

    out = capsys.readouterr().out
    assert "Row 2 [P2]" in out
    assert "Row 3" not in out
