from django.db import models


class Patient(models.Model):
    GENDER_CHOICES = [
        ('male', 'Male'),
        ('female', 'Female'),
        ('other', 'Other'),
    ]

    id = models.CharField(primary_key=True, max_length=64, editable=False)
    name = models.CharField(max_length=200)
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES)
    occupation = models.CharField(max_length=200)
    # 保存提交时的原始文本，不转成 DateField
    date_of_birth = models.CharField(max_length=40, blank=True, null=True)
    ssn = models.CharField(max_length=40, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'patients'
        # 同一时间戳的行按 id 排，保证列表顺序确定
        ordering = ['created_at', 'id']


class JournalEntry(models.Model):
    TYPE_CHOICES = [
        ('HealthCheck', 'Health check'),
        ('OccupationalHealthcare', 'Occupational healthcare'),
        ('Hospital', 'Hospital'),
    ]

    id = models.CharField(primary_key=True, max_length=64, editable=False)
    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name='entries')
    # journal 顺序：同一患者内从 0 递增
    position = models.PositiveIntegerField()
    type = models.CharField(max_length=30, choices=TYPE_CHOICES)
    date = models.CharField(max_length=40)
    description = models.TextField()
    specialist = models.CharField(max_length=200)
    diagnosis_codes = models.JSONField(default=list, blank=True)
    # 变体独有字段：healthCheckRating / employerName + sickLeave / discharge
    details = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'journal_entries'
        ordering = ['position']
        constraints = [
            models.UniqueConstraint(fields=['patient', 'position'], name='unique_entry_position'),
        ]
