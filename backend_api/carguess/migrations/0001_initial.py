import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='CarModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Time when the record was created.')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Time when the record was last updated.')),
                ('make', models.CharField(db_index=True, max_length=64)),
                ('model', models.CharField(db_index=True, max_length=64)),
                ('generation', models.CharField(blank=True, max_length=32, null=True)),
                ('body_type', models.CharField(choices=[('hatchback', 'Hatchback'), ('sedan', 'Sedan'), ('suv', 'SUV'), ('coupe', 'Coupe'), ('convertible', 'Convertible'), ('wagon', 'Wagon'), ('minivan', 'Minivan'), ('pickup', 'Pickup')], max_length=16)),
                ('country_of_origin', models.CharField(max_length=64)),
                ('production_start_year', models.PositiveSmallIntegerField(help_text='First production year.')),
                ('production_end_year', models.PositiveSmallIntegerField(blank=True, help_text='Last production year, if ended.', null=True)),
            ],
            options={
                'verbose_name': 'Car model',
                'verbose_name_plural': 'Car models',
                'ordering': ['make', 'model', 'production_start_year'],
            },
        ),
        migrations.CreateModel(
            name='CarVariant',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Time when the record was created.')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Time when the record was last updated.')),
                ('fuel_type', models.CharField(blank=True, choices=[('petrol', 'Petrol'), ('diesel', 'Diesel'), ('electric', 'Electric'), ('hybrid', 'Hybrid')], max_length=16, null=True)),
                ('transmission', models.CharField(blank=True, choices=[('manual', 'Manual'), ('automatic', 'Automatic')], max_length=16, null=True)),
                ('power_hp', models.PositiveIntegerField(blank=True, null=True)),
                ('engine_type', models.CharField(blank=True, help_text='Engine layout, e.g. I4, V6.', max_length=32, null=True)),
                ('displacement_cc', models.PositiveIntegerField(blank=True, null=True)),
                ('max_speed_kmh', models.PositiveIntegerField(blank=True, null=True)),
                ('zero_to_hundred_sec', models.FloatField(blank=True, help_text='0-100 km/h time in seconds.', null=True)),
                ('production_start_year', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('production_end_year', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('model', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='variants', to='carguess.carmodel')),
            ],
            options={
                'verbose_name': 'Car variant',
                'verbose_name_plural': 'Car variants',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='DailyPuzzle',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Time when the record was created.')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Time when the record was last updated.')),
                ('date', models.CharField(db_index=True, help_text='Date key (YYYY-MM-DD).', max_length=10)),
                ('mode', models.CharField(choices=[('easy', 'Easy'), ('hard', 'Hard')], max_length=8)),
                ('target_model', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='daily_puzzles', to='carguess.carmodel')),
                ('target_variant', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='daily_puzzles', to='carguess.carvariant')),
            ],
            options={
                'verbose_name': 'Daily puzzle',
                'verbose_name_plural': 'Daily puzzles',
                'ordering': ['-date', 'mode'],
                'constraints': [models.UniqueConstraint(fields=('date', 'mode'), name='unique_daily_puzzle_date_mode')],
            },
        ),
    ]
