# Generated initial migration for schedule app
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ScheduleAssignment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('position', models.PositiveIntegerField()),
                ('time', models.CharField(max_length=64)),
                ('room', models.CharField(max_length=32)),
                ('room_url', models.URLField(blank=True, default='')),
                ('team_id', models.CharField(max_length=64)),
                ('team_name', models.CharField(max_length=100)),
                ('devpost', models.URLField(blank=True, default='')),
                ('member_names', models.JSONField(blank=True, default=list, help_text='Team member display names')),
                ('judges', models.JSONField(blank=True, default=list, help_text='List of {id, name} objects')),
                ('imported_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'ordering': ['position'],
                'indexes': [models.Index(fields=['time', 'room'], name='assignment_time_room_idx')],
            },
        ),
    ]
