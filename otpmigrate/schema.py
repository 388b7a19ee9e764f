"""Protobuf schema of the Google Authenticator migration payload.

Equivalent to compiling:

    syntax = "proto3";
    package otpmigrate;

    message MigrationPayload {
      enum Algorithm { ALGORITHM_UNSPECIFIED = 0; SHA1 = 1; SHA256 = 2; SHA512 = 3; MD5 = 4; }
      enum DigitCount { DIGIT_COUNT_UNSPECIFIED = 0; SIX = 1; EIGHT = 2; SEVEN = 3; }
      enum OtpType { OTP_TYPE_UNSPECIFIED = 0; HOTP = 1; TOTP = 2; }

      message OtpParameters {
        bytes secret = 1;
        string name = 2;
        string issuer = 3;
        Algorithm algorithm = 4;
        DigitCount digits = 5;
        OtpType type = 6;
        int64 counter = 7;
      }

      repeated OtpParameters otp_parameters = 1;
      int32 version = 2;
      int32 batch_size = 3;
      int32 batch_index = 4;
      int32 batch_id = 5;
    }

The descriptor is built in code so no protoc step is needed. It lives in a
private pool to stay out of the way of other migration schemas a host
application may have registered.
"""
from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

_F = descriptor_pb2.FieldDescriptorProto

PACKAGE = 'otpmigrate'
PAYLOAD = PACKAGE + '.MigrationPayload'
PARAMETERS = PAYLOAD + '.OtpParameters'

ENUMS = (
    ('Algorithm', (('ALGORITHM_UNSPECIFIED', 0), ('SHA1', 1), ('SHA256', 2), ('SHA512', 3), ('MD5', 4))),
    ('DigitCount', (('DIGIT_COUNT_UNSPECIFIED', 0), ('SIX', 1), ('EIGHT', 2), ('SEVEN', 3))),
    ('OtpType', (('OTP_TYPE_UNSPECIFIED', 0), ('HOTP', 1), ('TOTP', 2))),
)

PARAMETER_FIELDS = (
    ('secret', 1, _F.TYPE_BYTES, None),
    ('name', 2, _F.TYPE_STRING, None),
    ('issuer', 3, _F.TYPE_STRING, None),
    ('algorithm', 4, _F.TYPE_ENUM, '.' + PAYLOAD + '.Algorithm'),
    ('digits', 5, _F.TYPE_ENUM, '.' + PAYLOAD + '.DigitCount'),
    ('type', 6, _F.TYPE_ENUM, '.' + PAYLOAD + '.OtpType'),
    ('counter', 7, _F.TYPE_INT64, None),
)

BATCH_FIELDS = (
    ('version', 2),
    ('batch_size', 3),
    ('batch_index', 4),
    ('batch_id', 5),
)


def buildFileDescriptor():
    proto = descriptor_pb2.FileDescriptorProto(
        name='otpmigrate/migration.proto', package=PACKAGE, syntax='proto3')
    payload = proto.message_type.add(name='MigrationPayload')
    for enumName, values in ENUMS:
        enum = payload.enum_type.add(name=enumName)
        for valueName, number in values:
            enum.value.add(name=valueName, number=number)

    params = payload.nested_type.add(name='OtpParameters')
    for name, number, fieldType, typeName in PARAMETER_FIELDS:
        field = params.field.add(name=name, number=number, type=fieldType, label=_F.LABEL_OPTIONAL)
        if typeName:
            field.type_name = typeName

    payload.field.add(
        name='otp_parameters', number=1, type=_F.TYPE_MESSAGE,
        label=_F.LABEL_REPEATED, type_name='.' + PARAMETERS)
    for name, number in BATCH_FIELDS:
        payload.field.add(name=name, number=number, type=_F.TYPE_INT32, label=_F.LABEL_OPTIONAL)
    return proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(buildFileDescriptor().SerializeToString())

MigrationPayload = message_factory.GetMessageClass(_pool.FindMessageTypeByName(PAYLOAD))
OtpParameters = message_factory.GetMessageClass(_pool.FindMessageTypeByName(PARAMETERS))
