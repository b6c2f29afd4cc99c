# manage.py

from dotenv import load_dotenv
load_dotenv()

import asyncio
from decimal import Decimal

import typer
import uvicorn
from typing_extensions import Annotated

# CLI manajemen untuk project FastAPI, dibangun dengan Typer
cli = typer.Typer(
    help="Manajemen CLI untuk Shipping Fee API."
)

DEFAULT_SHIPPING_METHODS = [
    {
        'name': 'Standard Shipping',
        'description': 'Standard delivery',
        'base_cost': Decimal('30.00'),
        'cost_per_kg': Decimal('5.00'),
        'estimated_days': 5,
    },
    {
        'name': 'Express Shipping',
        'description': 'Express delivery',
        'base_cost': Decimal('50.00'),
        'cost_per_kg': Decimal('10.00'),
        'estimated_days': 2,
    },
]

# --- Database Commands ---

@cli.command()
def init_db():
    """
    Inisialisasi database dan membuat semua tabel.
    """
    from app.database import init_models, async_engine

    async def create_tables():
        typer.echo("Membuat semua tabel sesuai models...")
        await init_models()
        await async_engine.dispose()
        typer.secho("Database berhasil diinisialisasi.", fg=typer.colors.GREEN)

    asyncio.run(create_tables())

async def seed_shipping_methods(session, methods=DEFAULT_SHIPPING_METHODS) -> int:
    """Insert metode default yang belum ada, return jumlah yang ditambahkan"""
    from app.models import ShippingMethod
    from app.repositories import ShippingMethodRepository

    repository = ShippingMethodRepository(session)
    created = 0
    for data in methods:
        if await repository.get_by_name(data['name']) is not None:
            continue
        await repository.add(ShippingMethod(**data))
        created += 1
    await session.commit()
    return created

@cli.command()
def seed():
    """
    Isi tabel shipping_methods dengan metode default (Standard dan Express).
    Nama yang sudah ada dilewati.
    """
    from app.database import AsyncSessionLocal, init_models, async_engine

    async def run_seed():
        await init_models()
        async with AsyncSessionLocal() as session:
            created = await seed_shipping_methods(session)
        await async_engine.dispose()
        typer.secho(f"{created} shipping method(s) ditambahkan.", fg=typer.colors.GREEN)

    asyncio.run(run_seed())

@cli.command()
def create_zone(
    zone_name: Annotated[str, typer.Argument(help="Nama zona tujuan (harus unik).")],
    additional_fee: Annotated[str, typer.Argument(help="Biaya tambahan zona, misal 10.00.")]
):
    """
    Membuat zona pengiriman baru lewat service layer (validasi yang sama dengan API).
    """
    from app.config import settings
    from app.database import AsyncSessionLocal, init_models, async_engine
    from app.services import create_service_registry
    from app.services.exceptions import ValidationError

    async def add_zone() -> bool:
        await init_models()
        try:
            async with AsyncSessionLocal() as session:
                services = create_service_registry(session, settings.model_dump())
                zone = await services.shipping_zone.create(
                    {'zone_name': zone_name, 'additional_fee': additional_fee}
                )
        except ValidationError as e:
            for field, messages in e.errors.items():
                for message in messages:
                    typer.secho(f"Gagal: {field}: {message}", fg=typer.colors.RED)
            return False
        finally:
            await async_engine.dispose()
        typer.secho(f"Zona '{zone['zone_name']}' berhasil dibuat (id={zone['id']}).", fg=typer.colors.GREEN)
        return True

    if not asyncio.run(add_zone()):
        raise typer.Exit(code=1)

# --- Server Commands ---

@cli.command()
def run(
    host: str = "127.0.0.1",
    port: int = 8000,
    reload: bool = True
):
    """
    Menjalankan development server Uvicorn.
    """
    typer.echo(f"Menjalankan server di http://{host}:{port}")
    uvicorn.run("main:app", host=host, port=port, reload=reload, factory=True)


if __name__ == "__main__":
    cli()
